# =============================================================================
# 01_Auth.py - Sign in / sign up
# =============================================================================
from __future__ import annotations
import streamlit as st

from classroom_core.auth import redirect_if_signed_in
from classroom_core.auth.guard import HOME_PAGE
from classroom_core.state import push_toast
from classroom_core.ui.components import brand_header, demo_account_html, show_toast
from classroom_core.ui.page import bootstrap_page

SIGNUP_FIELDS = ("signup_name", "signup_email", "signup_password")

config, provider = bootstrap_page("Đăng nhập", icon="🎓", layout="centered", sidebar="collapsed")
redirect_if_signed_in(provider)

# Widgets cannot be reset after they render, so clearing happens on the next run
if st.session_state.get("signup_clear_form"):
    for key in SIGNUP_FIELDS:
        st.session_state[key] = ""
    st.session_state["signup_clear_form"] = False

brand_header()
st.markdown("#### Chào mừng đến với Codetrio")
st.caption("Đăng nhập hoặc đăng ký để tiếp tục")

signin_tab, signup_tab = st.tabs(["Đăng nhập", "Đăng ký"])

# ============================================================================
# SIGN IN
# ============================================================================
with signin_tab:
    with st.form("signin_form"):
        email = st.text_input("Email", placeholder="admin@codetrio.com", key="signin_email")
        password = st.text_input("Mật khẩu", type="password", placeholder="••••••••", key="signin_password")
        submitted = st.form_submit_button("Đăng nhập", type="primary", use_container_width=True)

    if submitted:
        with st.spinner("Đang đăng nhập..."):
            outcome = provider.sign_in(email, password)
        if outcome.success:
            push_toast(outcome.title, outcome.description, outcome.variant)
            st.switch_page(HOME_PAGE)
        else:
            show_toast(outcome.title, outcome.description, outcome.variant)

# ============================================================================
# SIGN UP
# ============================================================================
with signup_tab:
    with st.form("signup_form"):
        full_name = st.text_input("Họ và tên", placeholder="Nguyễn Văn A", key="signup_name")
        signup_email = st.text_input("Email", placeholder="email@example.com", key="signup_email")
        signup_password = st.text_input(
            "Mật khẩu", type="password", placeholder="••••••••", key="signup_password"
        )
        st.caption("Mật khẩu phải có ít nhất 6 ký tự")
        signup_submitted = st.form_submit_button("Đăng ký", type="primary", use_container_width=True)

    if signup_submitted:
        with st.spinner("Đang đăng ký..."):
            outcome = provider.sign_up(signup_email, signup_password, full_name, config.site_url)
        if outcome.success:
            push_toast(outcome.title, outcome.description, outcome.variant)
            st.session_state["signup_clear_form"] = True
            st.rerun()
        else:
            show_toast(outcome.title, outcome.description, outcome.variant)

if config.demo_account:
    st.markdown(demo_account_html(*config.demo_account), unsafe_allow_html=True)
