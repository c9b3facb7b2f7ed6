# =============================================================================
# tests/integration/test_auth_dashboard_flow.py
# Integration Tests for sign-in → guard → dashboard
# =============================================================================

import pytest

from conftest import set_table_rows
from classroom_core.auth import RouteDecision, decide_route, get_session_provider
from classroom_core.auth.models import Role
from classroom_core.services import ClassService, DashboardStatus, build_dashboard


def _route(provider, require_admin=False):
    return decide_route(
        is_loading=provider.is_loading,
        has_session=provider.session is not None,
        is_admin=provider.has_role(Role.ADMIN),
        require_admin=require_admin,
    )


class TestAuthDashboardFlow:
    """
    Integration tests for the visitor journey.

    Tests the flow:
    1. Anonymous visitor is sent to sign-in
    2. Form validation before any remote call
    3. Sign-in installs a session
    4. Dashboard loads for the session's role
    """

    def test_sign_in_with_empty_password(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)

        outcome = provider.sign_in("a@b.com", "")

        assert outcome.description == "Vui lòng nhập đầy đủ email và mật khẩu"
        mock_supabase.auth.sign_in_with_password.assert_not_called()
        mock_supabase.auth.sign_out.assert_not_called()

    def test_sign_up_with_five_character_password(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)

        outcome = provider.sign_up("a@b.com", "12345", "Nguyễn Văn A", "http://localhost:8501/")

        assert "6 ký tự" in outcome.description
        mock_supabase.auth.sign_up.assert_not_called()

    def test_admin_with_no_classes_sees_call_to_action(self, admin_supabase, session_state):
        provider = get_session_provider(session_state, client=admin_supabase)
        assert _route(provider) is RouteDecision.REDIRECT_AUTH

        assert provider.sign_in("ntq.145@gmail.com", "123456").success
        assert _route(provider) is RouteDecision.RENDER
        assert _route(provider, require_admin=True) is RouteDecision.RENDER

        view = build_dashboard(ClassService(admin_supabase), provider)

        assert view.status is DashboardStatus.EMPTY
        assert view.show_create_first_class

    def test_student_is_kept_off_admin_page(self, mock_supabase, session_state, sample_class_rows):
        set_table_rows(mock_supabase, "classes", sample_class_rows)
        provider = get_session_provider(session_state, client=mock_supabase)
        provider.sign_in("hs@b.com", "123456")

        assert _route(provider, require_admin=True) is RouteDecision.REDIRECT_HOME

        view = build_dashboard(ClassService(mock_supabase), provider)
        assert view.status is DashboardStatus.READY
        assert not view.is_admin

    def test_sign_out_sends_back_to_auth(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)
        provider.sign_in("hs@b.com", "123456")
        session_state["dashboard_view"] = "cached"

        provider.sign_out()

        assert _route(provider) is RouteDecision.REDIRECT_AUTH
        assert session_state["dashboard_view"] is None
