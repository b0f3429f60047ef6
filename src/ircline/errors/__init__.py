"""Error types and error-logging helpers."""

from .handling import (  # noqa: F401
    RETRYABLE_EXCEPTIONS,
    classify_error,
    is_retryable_error,
    log_error,
)
from .internal import (  # noqa: F401
    InternalError,
    InvalidMessage,
    NetworkError,
    ParsingError,
)

__all__ = [
    "InternalError",
    "InvalidMessage",
    "NetworkError",
    "ParsingError",
    "RETRYABLE_EXCEPTIONS",
    "classify_error",
    "is_retryable_error",
    "log_error",
]
