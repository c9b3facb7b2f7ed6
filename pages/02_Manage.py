# =============================================================================
# 02_Manage.py - Class overview for administrators
# =============================================================================
from __future__ import annotations
import streamlit as st

from classroom_core.auth import protected_route, render_user_sidebar
from classroom_core.errors import DataFetchError, ErrorContext
from classroom_core.services import ClassService, classes_to_frame
from classroom_core.ui.components import brand_header
from classroom_core.ui.page import bootstrap_page

config, provider = bootstrap_page("Quản lý", icon="⚙️")
protected_route(provider, require_admin=True)
render_user_sidebar(provider)

brand_header(subtitle="Quản lý lớp học")
st.markdown("## Tổng quan lớp học")

with ErrorContext("Tải tổng quan lớp học"):
    result = ClassService(provider.client).fetch_classes()
    if not result.success:
        raise DataFetchError(result.error or "Không thể tải danh sách lớp học", table="classes")

    frame = classes_to_frame(result.data)
    total_students = int(frame["Học sinh"].sum()) if not frame.empty else 0

    m1, m2 = st.columns(2)
    m1.metric("Số lớp học", len(frame))
    m2.metric("Tổng số học sinh", total_students)

    st.dataframe(frame, use_container_width=True, hide_index=True)

if st.button("← Về trang chủ", key="back_home"):
    st.switch_page("Home.py")
