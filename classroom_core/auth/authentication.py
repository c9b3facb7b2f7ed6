"""
Authentication flows for Codetrio.

Each flow validates the form input locally, talks to Supabase Auth and
returns an ``AuthOutcome`` describing the notification to show. Nothing in
here renders; pages turn outcomes into toasts.

Remote errors are classified by their structured ``code`` when Supabase
sends one. Matching on the message text is kept only for servers that
still answer without codes.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, MutableMapping, Optional

from supabase import AuthError

from classroom_core.errors import ValidationError
from classroom_core.logging import get_logger
from .models import Role, Session, UserIdentity

logger = get_logger(__name__)


MIN_PASSWORD_LENGTH = 6

USER_ROLES_TABLE = "user_roles"

# Client-side keys that belong to the auth library
AUTH_KEY_PREFIX = "supabase.auth."
AUTH_KEY_MARKER = "sb-"

INVALID_CREDENTIAL_CODES = frozenset({"invalid_credentials"})
ALREADY_REGISTERED_CODES = frozenset({"user_already_exists", "email_exists"})
INVALID_CREDENTIALS_TEXT = "Invalid login credentials"
ALREADY_REGISTERED_TEXT = "User already registered"


# ==================== USER-FACING COPY ====================

TITLE_ERROR = "Lỗi"
MSG_SIGNIN_MISSING_FIELDS = "Vui lòng nhập đầy đủ email và mật khẩu"
MSG_SIGNUP_MISSING_FIELDS = "Vui lòng điền đầy đủ thông tin"
MSG_PASSWORD_TOO_SHORT = f"Mật khẩu phải có ít nhất {MIN_PASSWORD_LENGTH} ký tự"

TITLE_SIGNIN_FAILED = "Đăng nhập thất bại"
MSG_INVALID_CREDENTIALS = "Email hoặc mật khẩu không chính xác"
TITLE_SIGNIN_ERROR = "Lỗi đăng nhập"
TITLE_SIGNIN_SUCCESS = "Đăng nhập thành công"
MSG_SIGNIN_SUCCESS = "Chào mừng bạn đến với Codetrio!"

TITLE_ALREADY_REGISTERED = "Tài khoản đã tồn tại"
MSG_ALREADY_REGISTERED = "Email này đã được đăng ký, vui lòng đăng nhập"
TITLE_SIGNUP_ERROR = "Lỗi đăng ký"
TITLE_SIGNUP_SUCCESS = "Đăng ký thành công"
MSG_SIGNUP_SUCCESS = "Tài khoản đã được tạo, bạn có thể đăng nhập ngay!"

MSG_UNEXPECTED = "Đã có lỗi xảy ra, vui lòng thử lại"


class AuthErrorKind(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    ALREADY_REGISTERED = "already_registered"
    OTHER = "other"


@dataclass(frozen=True)
class AuthOutcome:
    success: bool
    title: str
    description: str
    variant: str = "destructive"
    session: Optional[Session] = None
    remote_called: bool = False

    @classmethod
    def rejected(cls, title: str, description: str, remote_called: bool = True) -> AuthOutcome:
        return cls(False, title, description, "destructive", None, remote_called)

    @classmethod
    def invalid_input(cls, error: ValidationError) -> AuthOutcome:
        return cls(False, TITLE_ERROR, error.message, "destructive", None, False)


def error_message(error: BaseException) -> str:
    return getattr(error, "message", None) or str(error)


def classify_auth_error(error: BaseException) -> AuthErrorKind:
    """
    Map a Supabase auth error onto the cases that get tailored copy.
    """
    code = getattr(error, "code", None)
    if code:
        code = str(getattr(code, "value", code))
        if code in INVALID_CREDENTIAL_CODES:
            return AuthErrorKind.INVALID_CREDENTIALS
        if code in ALREADY_REGISTERED_CODES:
            return AuthErrorKind.ALREADY_REGISTERED

    message = error_message(error)
    if INVALID_CREDENTIALS_TEXT in message:
        return AuthErrorKind.INVALID_CREDENTIALS
    if ALREADY_REGISTERED_TEXT in message:
        return AuthErrorKind.ALREADY_REGISTERED
    return AuthErrorKind.OTHER


def cleanup_auth_state(storage: MutableMapping[str, Any]) -> List[str]:
    """
    Remove auth artifacts left in client-side storage by an earlier session.

    Returns:
        The removed keys
    """
    stale = [
        key for key in list(storage.keys())
        if isinstance(key, str) and (key.startswith(AUTH_KEY_PREFIX) or AUTH_KEY_MARKER in key)
    ]
    for key in stale:
        del storage[key]
    if stale:
        logger.debug(f"Removed {len(stale)} stale auth key(s)")
    return stale


def validate_sign_in(email: str, password: str) -> None:
    if not email:
        raise ValidationError(MSG_SIGNIN_MISSING_FIELDS, field="email")
    if not password:
        raise ValidationError(MSG_SIGNIN_MISSING_FIELDS, field="password")


def validate_sign_up(email: str, password: str, full_name: str) -> None:
    for field, value in (("full_name", full_name), ("email", email), ("password", password)):
        if not value:
            raise ValidationError(MSG_SIGNUP_MISSING_FIELDS, field=field)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(MSG_PASSWORD_TOO_SHORT, field="password")


def resolve_role(client: Any, user_id: str) -> Role:
    """
    Look up the user's role in ``user_roles``.

    Any ``admin`` row wins; no rows, unknown values or a failed lookup all
    mean ``student``.
    """
    try:
        response = (
            client.table(USER_ROLES_TABLE)
            .select("role")
            .eq("user_id", user_id)
            .execute()
        )
    except Exception as e:
        logger.warning(f"Role lookup failed for user {user_id}, defaulting to student: {e}")
        return Role.STUDENT

    roles = {Role.parse(row.get("role")) for row in (response.data or [])}
    return Role.ADMIN if Role.ADMIN in roles else Role.STUDENT


def build_session(client: Any, auth_user: Any, auth_session: Any = None) -> Session:
    user = UserIdentity.from_auth_user(auth_user)
    return Session(
        user=user,
        role=resolve_role(client, user.id),
        access_token=getattr(auth_session, "access_token", None),
    )


def _global_sign_out(client: Any) -> None:
    # Best effort: an expired or missing session makes this fail, which is fine
    try:
        client.auth.sign_out({"scope": "global"})
    except Exception as e:
        logger.debug(f"Global sign-out before sign-in failed (ignored): {e}")


def sign_in(
    client: Any,
    email: str,
    password: str,
    storage: Optional[MutableMapping[str, Any]] = None,
) -> AuthOutcome:
    """
    Sign in with email and password.

    Order is fixed: validate, clear stale auth keys, best-effort global
    sign-out, then the real sign-in.
    """
    email = (email or "").strip()
    try:
        validate_sign_in(email, password)
    except ValidationError as e:
        return AuthOutcome.invalid_input(e)

    if storage is not None:
        cleanup_auth_state(storage)
    _global_sign_out(client)

    try:
        response = client.auth.sign_in_with_password({"email": email, "password": password})
    except AuthError as e:
        kind = classify_auth_error(e)
        logger.info(f"Sign-in rejected for {email}: {kind.value}")
        if kind is AuthErrorKind.INVALID_CREDENTIALS:
            return AuthOutcome.rejected(TITLE_SIGNIN_FAILED, MSG_INVALID_CREDENTIALS)
        return AuthOutcome.rejected(TITLE_SIGNIN_ERROR, error_message(e))
    except Exception as e:
        logger.error(f"Sign in error: {e}", exc_info=True)
        return AuthOutcome.rejected(TITLE_SIGNIN_ERROR, MSG_UNEXPECTED)

    if getattr(response, "user", None) is None:
        logger.warning(f"Sign-in for {email} returned no user")
        return AuthOutcome.rejected(TITLE_SIGNIN_ERROR, MSG_UNEXPECTED)

    session = build_session(client, response.user, getattr(response, "session", None))
    logger.info(f"Signed in {email} as {session.role.value}")
    return AuthOutcome(
        success=True,
        title=TITLE_SIGNIN_SUCCESS,
        description=MSG_SIGNIN_SUCCESS,
        variant="success",
        session=session,
        remote_called=True,
    )


def sign_up(
    client: Any,
    email: str,
    password: str,
    full_name: str,
    redirect_url: str,
) -> AuthOutcome:
    """
    Register a new account.

    The account is not signed in afterwards; Supabase may still require the
    visitor to confirm the email sent to ``redirect_url``.
    """
    email = (email or "").strip()
    full_name = (full_name or "").strip()
    try:
        validate_sign_up(email, password, full_name)
    except ValidationError as e:
        return AuthOutcome.invalid_input(e)

    try:
        response = client.auth.sign_up({
            "email": email,
            "password": password,
            "options": {
                "email_redirect_to": redirect_url,
                "data": {"full_name": full_name},
            },
        })
    except AuthError as e:
        kind = classify_auth_error(e)
        logger.info(f"Sign-up rejected for {email}: {kind.value}")
        if kind is AuthErrorKind.ALREADY_REGISTERED:
            return AuthOutcome.rejected(TITLE_ALREADY_REGISTERED, MSG_ALREADY_REGISTERED)
        return AuthOutcome.rejected(TITLE_SIGNUP_ERROR, error_message(e))
    except Exception as e:
        logger.error(f"Sign up error: {e}", exc_info=True)
        return AuthOutcome.rejected(TITLE_SIGNUP_ERROR, MSG_UNEXPECTED)

    if getattr(response, "user", None) is None:
        logger.warning(f"Sign-up for {email} returned no user")
        return AuthOutcome.rejected(TITLE_SIGNUP_ERROR, MSG_UNEXPECTED)

    logger.info(f"Registered {email}")
    return AuthOutcome(
        success=True,
        title=TITLE_SIGNUP_SUCCESS,
        description=MSG_SIGNUP_SUCCESS,
        variant="success",
        remote_called=True,
    )
