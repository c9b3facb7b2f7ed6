from __future__ import annotations
from typing import Any, Dict, List, MutableMapping, Optional

import streamlit as st

# Central registry for per-view session-state keys used across the app.
# Everything listed here belongs to the signed-in user and is reset when
# the session changes hands.
SESSION_DEFAULTS = {
    "dashboard_view": None,
    "pending_toasts": [],
    "signup_clear_form": False,
}


def _state(state: Optional[MutableMapping[str, Any]]) -> MutableMapping[str, Any]:
    return st.session_state if state is None else state


def _fresh(value: Any) -> Any:
    # Mutable defaults must not be shared between sessions
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def init_state(state: Optional[MutableMapping[str, Any]] = None) -> None:
    """Initialize session state with defaults."""
    state = _state(state)
    for k, v in SESSION_DEFAULTS.items():
        if k not in state:
            state[k] = _fresh(v)


def reset_view_state(state: Optional[MutableMapping[str, Any]] = None) -> None:
    """
    Put every per-view key back to its default.

    Pending toasts survive so a sign-in/out message still shows on the page
    the visitor lands on.
    """
    state = _state(state)
    toasts = list(state.get("pending_toasts") or [])
    for k, v in SESSION_DEFAULTS.items():
        state[k] = _fresh(v)
    state["pending_toasts"] = toasts


def push_toast(
    title: str,
    description: str,
    variant: str = "success",
    state: Optional[MutableMapping[str, Any]] = None,
) -> None:
    """Queue a notification to show on the next rendered page."""
    state = _state(state)
    toasts = list(state.get("pending_toasts") or [])
    toasts.append({"title": title, "description": description, "variant": variant})
    state["pending_toasts"] = toasts


def pop_toasts(state: Optional[MutableMapping[str, Any]] = None) -> List[Dict[str, str]]:
    state = _state(state)
    toasts = list(state.get("pending_toasts") or [])
    state["pending_toasts"] = []
    return toasts
