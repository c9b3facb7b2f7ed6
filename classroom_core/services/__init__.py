# =============================================================================
# classroom_core/services/__init__.py
# Service Layer for Codetrio
# Separates remote data access from page rendering
# =============================================================================

from .base_service import BaseService, ServiceResult
from .class_service import (
    ClassSummary,
    ClassService,
    DashboardStatus,
    DashboardView,
    build_dashboard,
    classes_to_frame,
)

__all__ = [
    "BaseService",
    "ServiceResult",
    "ClassSummary",
    "ClassService",
    "DashboardStatus",
    "DashboardView",
    "build_dashboard",
    "classes_to_frame",
]
