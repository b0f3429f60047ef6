from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import InternalError, NetworkError, ParsingError


def classify_error(error: BaseException) -> str:
    """Map an exception onto the error category used in structured logs."""
    if isinstance(error, NetworkError | OSError | ConnectionError | TimeoutError):
        return "network"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(
    message: str, error: BaseException, context: dict[str, object] | None = None
) -> None:
    """Logs an error message with the associated exception details.

    The error category is derived from the exception type so that repeated
    failures of the same kind aggregate together.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {error}",
        exception=error,
        context=context,
    )


# ConnectionError is an OSError subclass.
RETRYABLE_EXCEPTIONS: tuple[type[BaseException], ...] = (
    NetworkError,
    OSError,
    TimeoutError,
)


def is_retryable_error(error: BaseException) -> bool:
    """Check if an exception should trigger a retry."""
    return isinstance(error, RETRYABLE_EXCEPTIONS)
