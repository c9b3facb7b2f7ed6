from __future__ import annotations
from html import escape
from typing import Iterable, Optional

import streamlit as st

from classroom_core.ranking import RankTier, SHOWCASE_POINTS, tier_config
from classroom_core.services import ClassSummary, DashboardView
from classroom_core.state import pop_toasts
from .rank_badge import BadgeSize, render_rank_badge
from .theme import DANGER_COLOR

APP_SUBTITLE = "Hệ thống quản lý lớp học lập trình"

TOAST_ICONS = {
    "success": "✅",
    "destructive": "⚠️",
}


def brand_header(title: str = "Codetrio", subtitle: str = APP_SUBTITLE, icon: str = "💻"):
    st.markdown(f"""
        <div class="ct-brand">
            <div class="ct-brand-icon">{icon}</div>
            <div>
                <h1 class="ct-brand-title">{escape(title)}</h1>
                <p class="ct-brand-subtitle">{escape(subtitle)}</p>
            </div>
        </div>
    """, unsafe_allow_html=True)


def show_toast(title: str, description: str, variant: str = "success") -> None:
    st.toast(f"**{title}**  \n{description}", icon=TOAST_ICONS.get(variant, "ℹ️"))


def flush_toasts(state=None) -> None:
    """Show notifications queued before a page switch or rerun."""
    for toast in pop_toasts(state):
        show_toast(toast["title"], toast["description"], toast.get("variant", "success"))


def demo_account_html(email: str, password: str) -> str:
    return (
        f'<div class="ct-card ct-demo"><strong>Tài khoản demo:</strong><br/>'
        f"Email: {escape(email)}<br/>Mật khẩu: {escape(password)}</div>"
    )


def role_pill_html(label: str, is_admin: bool) -> str:
    css = "ct-role-admin" if is_admin else "ct-role-student"
    return f'<span class="ct-pill {css}">{escape(label)}</span>'


def class_card_html(cls: ClassSummary) -> str:
    return f"""
        <div class="ct-card">
            <div class="ct-card-head">
                <p class="ct-card-title">{escape(cls.name)}</p>
                <span class="ct-pill">{escape(cls.language)}</span>
            </div>
            <p class="ct-card-desc">{escape(cls.display_description)}</p>
            <span class="ct-card-meta">👥 {cls.student_count} học sinh</span>
        </div>
    """


def render_class_grid(classes: Iterable[ClassSummary], columns: int = 3) -> None:
    classes = list(classes)
    for start in range(0, len(classes), columns):
        cols = st.columns(columns)
        for col, cls in zip(cols, classes[start:start + columns]):
            with col:
                st.markdown(class_card_html(cls), unsafe_allow_html=True)
                st.button("🏆 Xếp hạng", key=f"rank_{cls.id}", use_container_width=True)


def render_empty_state(view: DashboardView) -> bool:
    """
    Empty class list call-to-action.

    Returns:
        True when the admin clicked the create-first-class button
    """
    st.markdown(f"""
        <div class="ct-card ct-empty">
            <div class="ct-empty-icon">🎓</div>
            <h3>{escape(view.empty_title)}</h3>
            <p class="ct-card-meta">{escape(view.empty_message)}</p>
        </div>
    """, unsafe_allow_html=True)
    if view.show_create_first_class:
        return st.button("➕ Tạo lớp học đầu tiên", key="create_first_class", type="primary")
    return False


def render_error_state(message: Optional[str]) -> bool:
    """
    Fetch failure notice.

    Returns:
        True when the visitor asked to retry
    """
    st.markdown(
        f'<div class="ct-card ct-empty" style="border-color:{DANGER_COLOR};">'
        f'<div class="ct-empty-icon">⚠️</div><p>{escape(message or "")}</p></div>',
        unsafe_allow_html=True,
    )
    return st.button("🔄 Thử lại", key="retry_fetch_classes")


def render_rank_showcase() -> None:
    """Example badge for each tier with its point range."""
    st.markdown("### 🏆 Hệ thống xếp hạng Codetrio")
    st.caption("Hệ thống cấp bậc dựa trên điểm số giúp tạo động lực học tập")

    cols = st.columns(len(RankTier))
    for col, tier in zip(cols, RankTier):
        config = tier_config(tier)
        with col:
            st.markdown(
                f'<div class="ct-card" style="text-align:center;">'
                f"{render_rank_badge(tier, SHOWCASE_POINTS[tier], BadgeSize.LG)}"
                f'<p class="ct-card-meta" style="margin-top:.5rem;">{escape(config.range_label)}</p>'
                f"</div>",
                unsafe_allow_html=True,
            )
