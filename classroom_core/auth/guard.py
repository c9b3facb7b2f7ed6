"""
Route guard for protected pages.

``decide_route`` is the whole policy and has no side effects;
``protected_route`` applies it with Streamlit primitives. Call
``protected_route`` at the top of a page, after ``st.set_page_config``.
"""
from __future__ import annotations
from enum import Enum

import streamlit as st

from classroom_core.logging import get_logger
from .models import Role

logger = get_logger(__name__)

HOME_PAGE = "Home.py"
AUTH_PAGE = "pages/01_Auth.py"


class RouteDecision(str, Enum):
    LOADING = "loading"
    REDIRECT_AUTH = "redirect_auth"
    REDIRECT_HOME = "redirect_home"
    RENDER = "render"


def decide_route(
    is_loading: bool,
    has_session: bool,
    is_admin: bool,
    require_admin: bool = False,
) -> RouteDecision:
    if is_loading:
        return RouteDecision.LOADING
    if not has_session:
        return RouteDecision.REDIRECT_AUTH
    if require_admin and not is_admin:
        return RouteDecision.REDIRECT_HOME
    return RouteDecision.RENDER


def render_loading() -> None:
    st.markdown(
        '<div class="ct-loading"><div class="ct-spinner"></div></div>',
        unsafe_allow_html=True,
    )


def protected_route(provider, require_admin: bool = False) -> RouteDecision:
    """
    Render the page only for permitted visitors.

    Anything other than ``RENDER`` ends the script run: either a loading
    indicator is shown or the visitor is switched to another page.
    """
    decision = decide_route(
        is_loading=provider.is_loading,
        has_session=provider.session is not None,
        is_admin=provider.has_role(Role.ADMIN),
        require_admin=require_admin,
    )

    if decision is RouteDecision.LOADING:
        render_loading()
        st.stop()
    elif decision is RouteDecision.REDIRECT_AUTH:
        logger.info("No session, redirecting to sign-in")
        st.switch_page(AUTH_PAGE)
    elif decision is RouteDecision.REDIRECT_HOME:
        logger.info(f"{provider.user.email} is not an admin, redirecting home")
        st.switch_page(HOME_PAGE)

    return decision


def redirect_if_signed_in(provider) -> None:
    """Send an already signed-in visitor away from the sign-in page."""
    if not provider.is_loading and provider.session is not None:
        st.switch_page(HOME_PAGE)
