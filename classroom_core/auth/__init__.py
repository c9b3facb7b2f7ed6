"""
Authentication and access control for Codetrio.

Identity and roles come from Supabase Auth and the ``user_roles`` table;
this package keeps the signed-in session per browser session and gates
pages on it.
"""

from .models import Role, Session, UserIdentity
from .authentication import (
    AuthOutcome,
    AuthErrorKind,
    classify_auth_error,
    cleanup_auth_state,
    sign_in,
    sign_up,
)
from .session import SessionProvider, get_session_provider
from .guard import RouteDecision, decide_route, protected_route, redirect_if_signed_in
from .navigation import render_user_sidebar, add_logout_button

__all__ = [
    "Role",
    "Session",
    "UserIdentity",
    "AuthOutcome",
    "AuthErrorKind",
    "classify_auth_error",
    "cleanup_auth_state",
    "sign_in",
    "sign_up",
    "SessionProvider",
    "get_session_provider",
    "RouteDecision",
    "decide_route",
    "protected_route",
    "redirect_if_signed_in",
    "render_user_sidebar",
    "add_logout_button",
]
