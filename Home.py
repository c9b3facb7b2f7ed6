# =============================================================================
# Home.py - Codetrio class dashboard (entry point)
# =============================================================================
"""
Dashboard listing programming classes with their enrolled-student counts.

Run with:
    streamlit run Home.py
"""
from __future__ import annotations
from html import escape

import streamlit as st

from classroom_core.auth import Role, protected_route, render_user_sidebar
from classroom_core.auth.navigation import add_logout_button, role_label
from classroom_core.services import ClassService, DashboardStatus, build_dashboard
from classroom_core.ui.components import (
    brand_header,
    render_class_grid,
    render_empty_state,
    render_error_state,
    render_rank_showcase,
    role_pill_html,
)
from classroom_core.ui.page import bootstrap_page

# ============================================================================
# PAGE SETUP & AUTHENTICATION CHECK
# ============================================================================
config, provider = bootstrap_page("Danh sách lớp học", icon="💻")
protected_route(provider)
render_user_sidebar(provider, with_logout=False)

is_admin = provider.has_role(Role.ADMIN)

# ============================================================================
# HEADER
# ============================================================================
left, right = st.columns([3, 2])
with left:
    brand_header()
with right:
    st.markdown(
        f'<div style="text-align:right;"><strong>{escape(provider.user.email)}</strong><br/>'
        f"{role_pill_html(role_label(provider), is_admin)}</div>",
        unsafe_allow_html=True,
    )
    actions = st.columns(2)
    if is_admin and actions[0].button("⚙️ Quản lý", key="manage_button", use_container_width=True):
        st.switch_page("pages/02_Manage.py")
    add_logout_button(provider, container=actions[1], key="header_logout_button")

st.divider()

# ============================================================================
# CLASS LIST
# ============================================================================
title_col, action_col = st.columns([4, 1])
with title_col:
    st.markdown("## Danh sách lớp học")
    st.caption("Khám phá các lớp học lập trình C++ và Python")
with action_col:
    if is_admin:
        st.button("➕ Thêm lớp học", key="add_class_button", type="primary", use_container_width=True)

# Fetched once per session; retry/refresh clears the cached view
if st.session_state.get("dashboard_view") is None:
    with st.spinner("Đang tải danh sách lớp học..."):
        st.session_state["dashboard_view"] = build_dashboard(ClassService(provider.client), provider)

view = st.session_state["dashboard_view"]

if view.status is DashboardStatus.ERROR:
    if render_error_state(view.error_message):
        st.session_state["dashboard_view"] = None
        st.rerun()
elif view.status is DashboardStatus.EMPTY:
    render_empty_state(view)
else:
    render_class_grid(view.classes)
    if st.button("🔄 Làm mới", key="refresh_classes"):
        st.session_state["dashboard_view"] = None
        st.rerun()

# ============================================================================
# RANKING SHOWCASE
# ============================================================================
st.markdown("<br/>", unsafe_allow_html=True)
render_rank_showcase()
