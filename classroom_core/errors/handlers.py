# =============================================================================
# classroom_core/errors/handlers.py
# Error reporting for Codetrio pages
# =============================================================================

from __future__ import annotations
from typing import Optional
import streamlit as st

from classroom_core.logging import get_logger
from .exceptions import CodetrioError

logger = get_logger(__name__)


def handle_error(
    error: Exception,
    show_user_message: bool = True,
    log_error: bool = True,
    user_message: Optional[str] = None,
) -> None:
    """
    Log an error and tell the visitor about it.

    Codetrio errors carry their own code and recoverability; anything else
    is reported as ``UNKNOWN`` and treated as recoverable.

    Args:
        error: The exception to report
        show_user_message: Show the message on the page with ``st.error``
        log_error: Write the error and its traceback to the log
        user_message: Text shown instead of the error's own message
    """
    if isinstance(error, CodetrioError):
        code, details, recoverable = error.code, error.details, error.recoverable
        message = user_message or error.message
    else:
        code, details, recoverable = "UNKNOWN", {}, True
        message = user_message or str(error)

    if log_error:
        logger.error(f"[{code}] {message}", extra={"details": details}, exc_info=error)

    if not show_user_message:
        return
    if recoverable:
        st.error(f"Lỗi: {message}")
    else:
        st.error(f"Lỗi nghiêm trọng: {message}. Vui lòng liên hệ quản trị viên.")


class ErrorContext:
    """
    Report any error raised inside the block, then carry on rendering.

    Usage:
        with ErrorContext("Tải tổng quan lớp học"):
            rows = service.fetch_classes()

    Errors from a recoverable block are swallowed after being reported;
    with ``recoverable=False`` they propagate.
    """

    def __init__(self, operation: str, recoverable: bool = True):
        self.operation = operation
        self.recoverable = recoverable

    def __enter__(self) -> ErrorContext:
        logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            logger.debug(f"Completed: {self.operation}")
            return False

        if isinstance(exc_val, CodetrioError):
            handle_error(exc_val)
        else:
            handle_error(exc_val, user_message=f"{self.operation} thất bại")
        return self.recoverable
