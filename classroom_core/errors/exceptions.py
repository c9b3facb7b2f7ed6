# =============================================================================
# classroom_core/errors/exceptions.py
# Custom Exception Hierarchy for Codetrio
# =============================================================================

from typing import Optional, Dict, Any


class CodetrioError(Exception):
    """
    Base exception for all Codetrio errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (e.g., "AUTH_001")
        details: Additional context as a dictionary
        recoverable: Whether the user can recover by retrying
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "CT_000"
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        base = f"[{self.code}] {self.message}"
        if self.details:
            base += f" | Details: {self.details}"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# INPUT EXCEPTIONS
# =============================================================================

class ValidationError(CodetrioError):
    """Raised when form input fails local checks before any remote call"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field

        super().__init__(
            message=message,
            code="VAL_001",
            details=details,
            **kwargs,
        )


# =============================================================================
# REMOTE SERVICE EXCEPTIONS
# =============================================================================

class DataFetchError(CodetrioError):
    """Raised when a read against the data store fails"""

    def __init__(
        self,
        message: str,
        table: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            code="DATA_001",
            details=details,
            **kwargs,
        )


# =============================================================================
# CONFIGURATION EXCEPTIONS
# =============================================================================

class ConfigurationError(CodetrioError):
    """Raised when configuration is invalid or missing"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key

        super().__init__(
            message=message,
            code="CONFIG_001",
            details=details,
            recoverable=False,
            **kwargs,
        )
