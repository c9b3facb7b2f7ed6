"""
Identity types shared by the session provider, the route guard and the views.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class Role(str, Enum):
    ADMIN = "admin"
    STUDENT = "student"

    @classmethod
    def parse(cls, value: Union[str, "Role", None]) -> Optional["Role"]:
        """Return the matching role, or None for unknown values."""
        if isinstance(value, Role):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class UserIdentity:
    id: str
    email: str
    full_name: Optional[str] = None

    @classmethod
    def from_auth_user(cls, user: Any) -> UserIdentity:
        """Build from a Supabase auth ``User`` object."""
        metadata = getattr(user, "user_metadata", None) or {}
        return cls(
            id=str(user.id),
            email=getattr(user, "email", None) or "",
            full_name=metadata.get("full_name"),
        )


@dataclass(frozen=True)
class Session:
    """The signed-in visitor: identity plus the role that gates admin views."""
    user: UserIdentity
    role: Role = Role.STUDENT
    access_token: Optional[str] = None
