"""
Sidebar for signed-in visitors: who is signed in, their role, and the
logout button.
"""

import streamlit as st

from classroom_core.state import push_toast
from .guard import AUTH_PAGE
from .models import Role

ROLE_LABELS = {
    Role.ADMIN: "Quản trị viên",
    Role.STUDENT: "Học viên",
}

LOGOUT_LABEL = "Đăng xuất"
LOGOUT_TOAST_TITLE = "Đã đăng xuất"
LOGOUT_TOAST_MESSAGE = "Hẹn gặp lại bạn!"


def role_label(provider) -> str:
    return ROLE_LABELS[Role.ADMIN] if provider.has_role(Role.ADMIN) else ROLE_LABELS[Role.STUDENT]


def logout(provider) -> None:
    provider.sign_out()
    push_toast(LOGOUT_TOAST_TITLE, LOGOUT_TOAST_MESSAGE, state=provider.state)
    st.switch_page(AUTH_PAGE)


def add_logout_button(provider, container=None, key: str = "logout_button") -> None:
    """
    Add a logout button (to the sidebar unless ``container`` is given).
    """
    target = container if container is not None else st.sidebar
    if target.button(LOGOUT_LABEL, key=key, icon=":material/logout:", use_container_width=True):
        logout(provider)


def render_user_sidebar(provider, with_logout: bool = True) -> None:
    """
    Show the signed-in user in the sidebar. No-op without a session.
    """
    if provider.user is None:
        return

    with st.sidebar:
        st.markdown(f"**{provider.user.full_name or provider.user.email}**")
        st.caption(provider.user.email)
        st.caption(role_label(provider))
    if with_logout:
        add_logout_button(provider, key="sidebar_logout_button")
