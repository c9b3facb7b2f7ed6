# =============================================================================
# classroom_core/errors/__init__.py
# Centralized Error Handling for Codetrio
# =============================================================================

from .exceptions import (
    CodetrioError,
    ValidationError,
    DataFetchError,
    ConfigurationError,
)

from .handlers import (
    handle_error,
    ErrorContext,
)

__all__ = [
    # Exceptions
    "CodetrioError",
    "ValidationError",
    "DataFetchError",
    "ConfigurationError",
    # Handlers
    "handle_error",
    "ErrorContext",
]
