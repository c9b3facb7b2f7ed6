# =============================================================================
# tests/unit/test_route_guard.py
# Unit Tests for the route guard
# =============================================================================

import itertools

import pytest
from unittest.mock import MagicMock

from classroom_core.auth import guard
from classroom_core.auth.guard import AUTH_PAGE, HOME_PAGE, RouteDecision, decide_route
from classroom_core.auth.models import Role, Session, UserIdentity
from classroom_core.auth.session import SessionProvider


class TestDecideRoute:
    """Test render/redirect decisions"""

    @pytest.mark.parametrize("has_session,is_admin,require_admin", list(
        itertools.product([True, False], repeat=3)
    ))
    def test_never_redirects_while_loading(self, has_session, is_admin, require_admin):
        decision = decide_route(True, has_session, is_admin, require_admin)
        assert decision is RouteDecision.LOADING

    @pytest.mark.parametrize("require_admin", [True, False])
    def test_no_session_goes_to_auth(self, require_admin):
        assert decide_route(False, False, False, require_admin) is RouteDecision.REDIRECT_AUTH

    def test_student_on_admin_page_goes_home(self):
        assert decide_route(False, True, False, require_admin=True) is RouteDecision.REDIRECT_HOME

    def test_admin_on_admin_page_renders(self):
        assert decide_route(False, True, True, require_admin=True) is RouteDecision.RENDER

    @pytest.mark.parametrize("is_admin", [True, False])
    def test_any_session_renders_plain_page(self, is_admin):
        assert decide_route(False, True, is_admin) is RouteDecision.RENDER


def _provider(client, state, role=None, loading=False):
    provider = SessionProvider(client, state)
    if not loading:
        provider.initialize()
    if role is not None:
        provider._session = Session(user=UserIdentity(id="u-1", email="a@b.com"), role=role)
    return provider


class TestProtectedRoute:
    """Test that guard decisions become the matching Streamlit actions"""

    @pytest.fixture
    def st_mock(self, monkeypatch):
        mock_st = MagicMock()
        monkeypatch.setattr(guard, "st", mock_st)
        return mock_st

    def test_loading_stops_without_redirect(self, st_mock, mock_supabase, session_state):
        provider = _provider(mock_supabase, session_state, loading=True)

        decision = guard.protected_route(provider, require_admin=True)

        assert decision is RouteDecision.LOADING
        st_mock.stop.assert_called_once()
        st_mock.switch_page.assert_not_called()

    def test_no_session_switches_to_auth(self, st_mock, mock_supabase, session_state):
        provider = _provider(mock_supabase, session_state)

        decision = guard.protected_route(provider)

        assert decision is RouteDecision.REDIRECT_AUTH
        st_mock.switch_page.assert_called_once_with(AUTH_PAGE)
        assert AUTH_PAGE == "pages/01_Auth.py"

    def test_student_on_admin_page_switches_home(self, st_mock, mock_supabase, session_state):
        provider = _provider(mock_supabase, session_state, role=Role.STUDENT)

        decision = guard.protected_route(provider, require_admin=True)

        assert decision is RouteDecision.REDIRECT_HOME
        st_mock.switch_page.assert_called_once_with(HOME_PAGE)
        assert HOME_PAGE == "Home.py"

    @pytest.mark.parametrize("role,require_admin", [
        (Role.ADMIN, True),
        (Role.ADMIN, False),
        (Role.STUDENT, False),
    ])
    def test_permitted_visitor_renders(self, st_mock, mock_supabase, session_state, role, require_admin):
        provider = _provider(mock_supabase, session_state, role=role)

        decision = guard.protected_route(provider, require_admin=require_admin)

        assert decision is RouteDecision.RENDER
        st_mock.switch_page.assert_not_called()
        st_mock.stop.assert_not_called()


class TestRedirectIfSignedIn:
    """Test the sign-in page sends signed-in visitors home"""

    @pytest.fixture
    def st_mock(self, monkeypatch):
        mock_st = MagicMock()
        monkeypatch.setattr(guard, "st", mock_st)
        return mock_st

    def test_signed_in_goes_home(self, st_mock, mock_supabase, session_state):
        provider = _provider(mock_supabase, session_state, role=Role.STUDENT)

        guard.redirect_if_signed_in(provider)

        st_mock.switch_page.assert_called_once_with(HOME_PAGE)

    def test_anonymous_stays(self, st_mock, mock_supabase, session_state):
        guard.redirect_if_signed_in(_provider(mock_supabase, session_state))
        st_mock.switch_page.assert_not_called()

    def test_loading_stays(self, st_mock, mock_supabase, session_state):
        guard.redirect_if_signed_in(_provider(mock_supabase, session_state, loading=True))
        st_mock.switch_page.assert_not_called()
