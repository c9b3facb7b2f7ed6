"""
Common start of every Codetrio page: page config, stylesheet, logging,
configuration and the session provider.
"""
from __future__ import annotations
from typing import Tuple

import streamlit as st

from classroom_core.auth import SessionProvider, get_session_provider
from classroom_core.config import AppConfig, get_app_config
from classroom_core.errors import ConfigurationError, handle_error
from classroom_core.logging import setup_logging
from .components import flush_toasts
from .theme import apply_css


@st.cache_resource
def _configure_logging(level: int, log_to_file: bool) -> bool:
    # Once per process; page reruns must not reopen the log file
    setup_logging(level=level, log_to_file=log_to_file)
    return True


def bootstrap_page(
    title: str,
    icon: str = "💻",
    layout: str = "wide",
    sidebar: str = "auto",
) -> Tuple[AppConfig, SessionProvider]:
    st.set_page_config(
        page_title=f"{title} - Codetrio",
        page_icon=icon,
        layout=layout,
        initial_sidebar_state=sidebar,
    )
    apply_css()

    try:
        config = get_app_config()
    except ConfigurationError as e:
        handle_error(e)
        st.stop()

    _configure_logging(config.log_level_value, config.log_to_file)
    provider = get_session_provider()
    flush_toasts()
    return config, provider
