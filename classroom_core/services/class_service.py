# =============================================================================
# classroom_core/services/class_service.py
# Class listing for the dashboard
# =============================================================================
"""
Fetches programming classes with their enrolled-student counts and turns
the result into a view model the dashboard renders.

The count comes from PostgREST's embedded aggregate:

    classes?select=*,student_count:students(count)

which returns ``"student_count": [{"count": 3}]`` on every row.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from classroom_core.data import SupabaseService
from classroom_core.auth.models import Role
from .base_service import BaseService, ServiceResult


CLASSES_TABLE = "classes"
CLASSES_SELECT = "*, student_count:students(count)"

NO_DESCRIPTION = "Không có mô tả"
EMPTY_TITLE = "Chưa có lớp học nào"
EMPTY_MESSAGE_ADMIN = "Bắt đầu bằng cách tạo lớp học đầu tiên của bạn"
EMPTY_MESSAGE_STUDENT = "Vui lòng liên hệ với quản trị viên để được thêm vào lớp học"
FETCH_ERROR_MESSAGE = "Không thể tải danh sách lớp học, vui lòng thử lại"


@dataclass(frozen=True)
class ClassSummary:
    id: str
    name: str
    language: str
    description: Optional[str] = None
    student_count: int = 0

    @property
    def display_description(self) -> str:
        return self.description or NO_DESCRIPTION

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> ClassSummary:
        """Build a summary from a ``classes`` row with the embedded count."""
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            language=row.get("language") or "",
            description=row.get("description") or None,
            student_count=_extract_count(row.get("student_count")),
        )


def _extract_count(value: Any) -> int:
    # PostgREST returns a one-element list for an embedded count
    if isinstance(value, list):
        if not value:
            return 0
        value = value[0]
    if isinstance(value, dict):
        value = value.get("count")
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class ClassService(BaseService):
    """
    Read-only access to the ``classes`` table.

    Usage:
        service = ClassService(client)
        result = service.fetch_classes()
        if result.success:
            for cls in result.data:
                ...
    """

    def __init__(self, client=None):
        super().__init__()
        self.table = SupabaseService(CLASSES_TABLE, client=client)

    def _load(self) -> List[ClassSummary]:
        rows = self.table.select(CLASSES_SELECT)
        return [ClassSummary.from_row(row) for row in rows]

    def fetch_classes(self) -> ServiceResult:
        """
        Fetch every class visible to the current user.

        Row-level security on the store decides visibility; the result is
        whatever the signed-in session is allowed to read.
        """
        result = self.safe_execute("Fetching classes", self._load)
        if result.success:
            result.metadata = {"count": len(result.data)}
        return result


class DashboardStatus(str, Enum):
    READY = "ready"
    EMPTY = "empty"
    ERROR = "error"


@dataclass
class DashboardView:
    status: DashboardStatus
    is_admin: bool
    classes: List[ClassSummary] = field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def empty_title(self) -> str:
        return EMPTY_TITLE

    @property
    def empty_message(self) -> str:
        return EMPTY_MESSAGE_ADMIN if self.is_admin else EMPTY_MESSAGE_STUDENT

    @property
    def show_create_first_class(self) -> bool:
        return self.status is DashboardStatus.EMPTY and self.is_admin


def build_dashboard(service: ClassService, provider) -> DashboardView:
    """
    Fetch classes and decide what the dashboard shows.

    A failed fetch gets its own ``ERROR`` status instead of looking like an
    empty class list.
    """
    is_admin = provider.has_role(Role.ADMIN)
    result = service.fetch_classes()

    if not result.success:
        return DashboardView(
            status=DashboardStatus.ERROR,
            is_admin=is_admin,
            error_message=FETCH_ERROR_MESSAGE,
        )

    classes = list(result.data or [])
    status = DashboardStatus.READY if classes else DashboardStatus.EMPTY
    return DashboardView(status=status, is_admin=is_admin, classes=classes)


def classes_to_frame(classes: Sequence[ClassSummary]) -> pd.DataFrame:
    """Tabular view of the class list for the admin page."""
    columns = ["Tên lớp", "Ngôn ngữ", "Mô tả", "Học sinh"]
    if not classes:
        return pd.DataFrame(columns=columns)

    return pd.DataFrame(
        [
            {
                "Tên lớp": cls.name,
                "Ngôn ngữ": cls.language,
                "Mô tả": cls.display_description,
                "Học sinh": cls.student_count,
            }
            for cls in classes
        ],
        columns=columns,
    ).sort_values("Tên lớp", kind="stable").reset_index(drop=True)
