# =============================================================================
# classroom_core/data/supabase_client.py
# Supabase Client Configuration for Codetrio
# Handles the per-session client and read access to tables
# =============================================================================

from __future__ import annotations
from typing import Optional, Dict, Any, List, MutableMapping

import streamlit as st
from supabase import Client, create_client

from classroom_core.config import AppConfig, get_app_config
from classroom_core.errors import DataFetchError
from classroom_core.logging import get_logger

logger = get_logger(__name__)

CLIENT_STATE_KEY = "_supabase_client"


def get_supabase_client(config: Optional[AppConfig] = None) -> Client:
    """
    Create a Supabase client from the application configuration.

    Raises:
        ConfigurationError: when credentials are missing
    """
    config = config or get_app_config()
    logger.info(f"Creating Supabase client for {config.supabase_url}")
    return create_client(config.supabase_url, config.supabase_key)


def get_session_supabase_client(state: Optional[MutableMapping[str, Any]] = None) -> Client:
    """
    Get the Supabase client for the current browser session.

    The client carries the signed-in user's tokens, so it is kept in
    ``st.session_state`` rather than ``st.cache_resource``: a process-wide
    cache would hand one visitor's session to every other visitor.
    """
    state = st.session_state if state is None else state
    client = state.get(CLIENT_STATE_KEY)
    if client is None:
        client = get_supabase_client()
        state[CLIENT_STATE_KEY] = client
    return client


class SupabaseService:
    """
    Read access to a single Supabase table.
    """

    def __init__(self, table_name: str, client: Optional[Client] = None):
        """
        Args:
            table_name: Name of the Supabase table
            client: Client to use (defaults to the current session's client)
        """
        self.table_name = table_name
        self.client = client if client is not None else get_session_supabase_client()

    def select(self, columns: str = "*", filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Run a select against the table.

        Args:
            columns: PostgREST column expression, may embed related tables
            filters: Equality filters as column:value pairs

        Returns:
            List of row dictionaries

        Raises:
            DataFetchError: when the query fails
        """
        try:
            query = self.client.table(self.table_name).select(columns)
            for col, val in (filters or {}).items():
                query = query.eq(col, val)
            response = query.execute()
        except Exception as e:
            raise DataFetchError(
                f"Error fetching data from {self.table_name}: {e}",
                table=self.table_name,
            ) from e

        return list(response.data or [])
