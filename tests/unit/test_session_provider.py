# =============================================================================
# tests/unit/test_session_provider.py
# Unit Tests for SessionProvider
# =============================================================================

import pytest
from types import SimpleNamespace

from conftest import make_auth_user
from classroom_core.auth.guard import RouteDecision, decide_route
from classroom_core.auth.models import Role, Session, UserIdentity
from classroom_core.auth.session import PROVIDER_STATE_KEY, SessionProvider, get_session_provider


def _provider_with(role, client, state):
    provider = SessionProvider(client, state)
    provider.initialize()
    provider._session = Session(user=UserIdentity(id="u-1", email="a@b.com"), role=role)
    return provider


class TestInitialize:
    """Test session restore on first use"""

    def test_loading_until_initialized(self, mock_supabase, session_state):
        provider = SessionProvider(mock_supabase, session_state)
        assert provider.is_loading

        provider.initialize()

        assert not provider.is_loading
        assert provider.session is None

    def test_restores_existing_session(self, admin_supabase, session_state):
        user = make_auth_user(email="instructor@codetrio.com")
        admin_supabase.auth.get_session.return_value = SimpleNamespace(user=user, access_token="t")

        provider = SessionProvider(admin_supabase, session_state)
        provider.initialize()

        assert provider.user.email == "instructor@codetrio.com"
        assert provider.role is Role.ADMIN
        assert not provider.is_loading

    def test_lookup_failure_still_clears_loading(self, mock_supabase, session_state):
        mock_supabase.auth.get_session.side_effect = RuntimeError("refresh token expired")

        provider = SessionProvider(mock_supabase, session_state)
        provider.initialize()

        assert not provider.is_loading
        assert provider.session is None

    def test_initialize_runs_once(self, mock_supabase, session_state):
        provider = SessionProvider(mock_supabase, session_state)
        provider.initialize()
        provider.initialize()

        mock_supabase.auth.get_session.assert_called_once()


class TestHasRole:
    """hasRole is a pure predicate over the session role"""

    def test_no_session(self, mock_supabase, session_state):
        provider = SessionProvider(mock_supabase, session_state)
        provider.initialize()

        assert not provider.has_role(Role.ADMIN)
        assert not provider.has_role(Role.STUDENT)

    def test_student_is_never_admin(self, mock_supabase, session_state):
        provider = _provider_with(Role.STUDENT, mock_supabase, session_state)

        assert not provider.has_role("admin")
        assert not provider.has_role(Role.ADMIN)
        assert provider.has_role("student")

    def test_admin_is_admin(self, mock_supabase, session_state):
        provider = _provider_with(Role.ADMIN, mock_supabase, session_state)

        assert provider.has_role("admin")
        assert provider.has_role(Role.ADMIN)

    def test_unknown_role_name(self, mock_supabase, session_state):
        provider = _provider_with(Role.ADMIN, mock_supabase, session_state)
        assert not provider.has_role("instructor")


class TestSignInOut:
    """Test session replacement on sign-in and sign-out"""

    def test_sign_in_replaces_view_state(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)
        session_state["dashboard_view"] = "stale view"
        session_state["supabase.auth.token"] = "stale token"

        outcome = provider.sign_in("a@b.com", "123456")

        assert outcome.success
        assert provider.user.email == "a@b.com"
        assert session_state["dashboard_view"] is None
        assert "supabase.auth.token" not in session_state

    def test_failed_sign_in_keeps_state(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)
        session_state["dashboard_view"] = "view"

        outcome = provider.sign_in("a@b.com", "")

        assert not outcome.success
        assert provider.session is None
        assert session_state["dashboard_view"] == "view"

    def test_sign_up_does_not_sign_in(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)

        outcome = provider.sign_up("new@b.com", "123456", "Nguyễn Văn B", "http://localhost:8501/")

        assert outcome.success
        assert provider.session is None
        mock_supabase.auth.sign_out.assert_called_once_with({"scope": "local"})

    def test_sign_out_clears_session(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)
        provider.sign_in("a@b.com", "123456")
        mock_supabase.auth.sign_out.reset_mock()

        provider.sign_out()

        assert provider.session is None
        mock_supabase.auth.sign_out.assert_called_once_with({"scope": "local"})

    def test_sign_out_clears_locally_when_remote_fails(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)
        provider.sign_in("a@b.com", "123456")
        mock_supabase.auth.sign_out.side_effect = RuntimeError("network down")

        provider.sign_out()

        assert provider.session is None
        assert not provider.has_role(Role.STUDENT)


class TestProviderLifecycle:
    """Test provider creation and teardown"""

    def test_one_provider_per_session(self, mock_supabase, session_state):
        first = get_session_provider(session_state, client=mock_supabase)
        second = get_session_provider(session_state)

        assert first is second
        assert session_state[PROVIDER_STATE_KEY] is first
        mock_supabase.auth.get_session.assert_called_once()

    def test_defaults_installed(self, mock_supabase, session_state):
        get_session_provider(session_state, client=mock_supabase)

        assert session_state["dashboard_view"] is None
        assert session_state["pending_toasts"] == []

    def test_teardown_detaches(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)
        provider.teardown()

        assert PROVIDER_STATE_KEY not in session_state
        assert provider.session is None
        assert provider.is_loading


class TestSessionExpiry:
    """Test that a session the auth service dropped does not outlive it"""

    def test_expired_session_is_dropped_on_next_run(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)
        provider.sign_in("a@b.com", "123456")
        session_state["dashboard_view"] = "cached"
        mock_supabase.auth.get_session.return_value = None

        again = get_session_provider(session_state)

        assert again is provider
        assert provider.session is None
        assert session_state["dashboard_view"] is None
        assert decide_route(
            is_loading=provider.is_loading,
            has_session=provider.session is not None,
            is_admin=provider.has_role(Role.ADMIN),
        ) is RouteDecision.REDIRECT_AUTH

    def test_failed_check_drops_session(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)
        provider.sign_in("a@b.com", "123456")
        mock_supabase.auth.get_session.side_effect = RuntimeError("refresh token revoked")

        get_session_provider(session_state)

        assert provider.session is None

    def test_live_session_is_kept(self, mock_supabase, session_state):
        provider = get_session_provider(session_state, client=mock_supabase)
        provider.sign_in("a@b.com", "123456")
        mock_supabase.auth.get_session.return_value = SimpleNamespace(
            user=make_auth_user(), access_token="token-456"
        )
        session_state["dashboard_view"] = "cached"

        get_session_provider(session_state)

        assert provider.user.email == "a@b.com"
        assert session_state["dashboard_view"] == "cached"

    def test_no_check_without_session(self, mock_supabase, session_state):
        get_session_provider(session_state, client=mock_supabase)
        get_session_provider(session_state)

        mock_supabase.auth.get_session.assert_called_once()
