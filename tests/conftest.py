# =============================================================================
# tests/conftest.py
# Pytest Configuration and Fixtures
# =============================================================================

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from supabase import AuthError


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_class_rows():
    """Rows as PostgREST returns them for classes?select=*,student_count:students(count)"""
    return [
        {
            "id": "c-1",
            "name": "Python cơ bản",
            "description": "Nhập môn Python cho người mới",
            "language": "Python",
            "created_at": "2024-09-01T08:00:00+00:00",
            "student_count": [{"count": 12}],
        },
        {
            "id": "c-2",
            "name": "C++ nâng cao",
            "description": None,
            "language": "C++",
            "created_at": "2024-09-02T08:00:00+00:00",
            "student_count": [{"count": 0}],
        },
        {
            "id": "c-3",
            "name": "Cấu trúc dữ liệu",
            "description": "",
            "language": "C++",
            "created_at": "2024-09-03T08:00:00+00:00",
            "student_count": [],
        },
    ]


@pytest.fixture
def session_state():
    """Plain dict standing in for st.session_state"""
    return {}


def make_auth_user(user_id="u-1", email="a@b.com", full_name="Nguyễn Văn A"):
    return SimpleNamespace(id=user_id, email=email, user_metadata={"full_name": full_name})


def make_auth_response(user=None, access_token="token-123"):
    user = user if user is not None else make_auth_user()
    return SimpleNamespace(user=user, session=SimpleNamespace(access_token=access_token, user=user))


class FakeAuthApiError(AuthError):
    """Auth API error with the attributes Supabase sets, independent of its constructor"""

    def __init__(self, message, code=None, status=400):
        Exception.__init__(self, message)
        self.message = message
        self.code = code
        self.status = status


# =============================================================================
# MOCK FIXTURES
# =============================================================================

def _table_router(tables):
    """Route client.table(name) to per-table MagicMocks"""
    def table(name):
        if name not in tables:
            tables[name] = MagicMock(name=f"table:{name}")
        return tables[name]
    return table


def set_table_rows(client, table_name, rows):
    """Make every select chain on ``table_name`` return ``rows``"""
    table = client.table(table_name)
    response = SimpleNamespace(data=rows)
    table.select.return_value.execute.return_value = response
    table.select.return_value.eq.return_value.execute.return_value = response
    return table


@pytest.fixture
def mock_supabase():
    """Mock Supabase client with no session and empty tables"""
    mock_client = MagicMock()
    mock_client.table.side_effect = _table_router({})
    mock_client.auth.get_session.return_value = None
    mock_client.auth.sign_in_with_password.return_value = make_auth_response()
    mock_client.auth.sign_up.return_value = make_auth_response(
        user=make_auth_user(user_id="u-new", email="new@b.com")
    )
    mock_client.auth.sign_out.return_value = None
    set_table_rows(mock_client, "user_roles", [])
    set_table_rows(mock_client, "classes", [])
    return mock_client


@pytest.fixture
def admin_supabase(mock_supabase):
    """Mock client whose signed-in user holds the admin role"""
    set_table_rows(mock_supabase, "user_roles", [{"role": "admin"}])
    return mock_supabase
