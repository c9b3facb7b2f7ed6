"""
Session provider for Codetrio.

One ``SessionProvider`` exists per browser session. It is the only writer of
the signed-in identity; the route guard and the pages read it through the
provider they are handed.

Usage:
    provider = get_session_provider()
    protected_route(provider)
    if provider.has_role(Role.ADMIN):
        ...
"""

from __future__ import annotations
from typing import Any, MutableMapping, Optional, Union

import streamlit as st

from classroom_core.data import get_session_supabase_client
from classroom_core.logging import get_logger
from classroom_core.state import init_state, reset_view_state
from . import authentication
from .authentication import AuthOutcome
from .models import Role, Session, UserIdentity

logger = get_logger(__name__)

PROVIDER_STATE_KEY = "_session_provider"


class SessionProvider:
    """
    Holds the current session, its role and a loading flag.

    Args:
        client: Supabase client owned by this browser session
        state: Per-session storage (``st.session_state`` in the app)
    """

    def __init__(self, client: Any, state: MutableMapping[str, Any]):
        self.client = client
        self.state = state
        self._session: Optional[Session] = None
        self._is_loading = True
        self._initialized = False

    # ==================== READ SIDE ====================

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def user(self) -> Optional[UserIdentity]:
        return self._session.user if self._session else None

    @property
    def role(self) -> Optional[Role]:
        return self._session.role if self._session else None

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    def has_role(self, role: Union[Role, str]) -> bool:
        """True when a session exists and its role equals ``role``."""
        if self._session is None:
            return False
        return self._session.role is Role.parse(role)

    # ==================== LIFECYCLE ====================

    def initialize(self) -> None:
        """
        Restore an existing session from the auth service.

        Runs once; the loading flag clears whether a session was found,
        absent, or the lookup failed.
        """
        if self._initialized:
            return

        self._is_loading = True
        try:
            auth_session = self.client.auth.get_session()
            if auth_session is not None and getattr(auth_session, "user", None) is not None:
                self._session = authentication.build_session(
                    self.client, auth_session.user, auth_session
                )
                logger.info(f"Restored session for {self._session.user.email}")
        except Exception as e:
            logger.warning(f"Could not restore session: {e}")
            self._session = None
        finally:
            self._is_loading = False
            self._initialized = True

    def refresh(self) -> None:
        """
        Drop the local session once the auth service no longer holds one.

        The client refreshes tokens on its own; when that fails (expired
        refresh token, revoked session) ``get_session`` comes back empty.
        """
        if not self._initialized:
            self.initialize()
            return
        if self._session is None:
            return

        try:
            auth_session = self.client.auth.get_session()
        except Exception as e:
            logger.warning(f"Session check failed, signing out locally: {e}")
            auth_session = None

        if auth_session is None or getattr(auth_session, "user", None) is None:
            logger.info(f"Session for {self._session.user.email} expired")
            self._replace_session(None)

    def _replace_session(self, session: Optional[Session]) -> None:
        # View state from the previous identity never outlives it
        reset_view_state(self.state)
        self._session = session

    def sign_in(self, email: str, password: str) -> AuthOutcome:
        """
        Sign in and, on success, swap the local session in one step.
        """
        outcome = authentication.sign_in(self.client, email, password, storage=self.state)
        if outcome.success:
            self._replace_session(outcome.session)
        return outcome

    def sign_up(self, email: str, password: str, full_name: str, redirect_url: str) -> AuthOutcome:
        """
        Register an account. The current session is left untouched.

        When the project auto-confirms emails Supabase signs the new account
        in on the client; that client-side session is dropped again so the
        client and the provider agree.
        """
        outcome = authentication.sign_up(self.client, email, password, full_name, redirect_url)
        if outcome.success and self._session is None:
            try:
                self.client.auth.sign_out({"scope": "local"})
            except Exception as e:
                logger.debug(f"Local sign-out after sign-up failed (ignored): {e}")
        return outcome

    def sign_out(self) -> None:
        """
        End the session on this device.

        The local session is cleared even when the remote call fails.
        """
        email = self.user.email if self.user else None
        try:
            self.client.auth.sign_out({"scope": "local"})
        except Exception as e:
            logger.warning(f"Remote sign-out failed, clearing local session anyway: {e}")
        finally:
            self._replace_session(None)
        logger.info(f"Signed out {email or 'anonymous visitor'}")

    def teardown(self) -> None:
        """Detach this provider from its storage."""
        self._session = None
        self._is_loading = True
        self._initialized = False
        if self.state.get(PROVIDER_STATE_KEY) is self:
            del self.state[PROVIDER_STATE_KEY]


def get_session_provider(
    state: Optional[MutableMapping[str, Any]] = None,
    client: Any = None,
) -> SessionProvider:
    """
    Get the provider for the current browser session, creating and
    initializing it on first use. Later runs re-check that the auth
    service still holds the session.
    """
    state = st.session_state if state is None else state
    init_state(state)

    provider = state.get(PROVIDER_STATE_KEY)
    if provider is None:
        if client is None:
            client = get_session_supabase_client(state)
        provider = SessionProvider(client, state)
        state[PROVIDER_STATE_KEY] = provider
        provider.initialize()
    else:
        provider.refresh()
    return provider
