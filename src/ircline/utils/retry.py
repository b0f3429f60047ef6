"""Retry utilities for asynchronous operations using Tenacity."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..constants import IRC_RETRY_MAX_WAIT
from ..errors.handling import RETRYABLE_EXCEPTIONS, log_error
from ..logs.logger import logger


class RetryExhaustedError(Exception):
    """Exception raised when all retry attempts have been exhausted."""

    def __init__(
        self, message: str, attempts: int, final_exception: BaseException | None = None
    ) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.final_exception = final_exception


async def retry_async[T](
    operation: Callable[[int], Awaitable[T]],
    *,
    max_attempts: int = 3,
    operation_name: str = "operation",
    multiplier: float = 1.0,
    max_wait: float = IRC_RETRY_MAX_WAIT,
    retry_on: tuple[type[BaseException], ...] = RETRYABLE_EXCEPTIONS,
) -> T:
    """Retry an asynchronous operation with exponential backoff.

    Args:
        operation: Async callable receiving the 1-based attempt number.
        max_attempts: Maximum number of attempts.
        operation_name: Label used in log events.
        multiplier: Backoff multiplier in seconds (0 disables waiting).
        max_wait: Upper bound for a single backoff wait.
        retry_on: Exception types that trigger another attempt. Anything
            else propagates immediately.

    Returns:
        The result of the first successful attempt.

    Raises:
        RetryExhaustedError: If every attempt failed with a retryable error.
    """
    attempt_count = 0

    def before_attempt(retry_state) -> None:
        nonlocal attempt_count
        attempt_count = retry_state.attempt_number
        if attempt_count > 1:
            logger.log_event(
                "retry",
                "attempt",
                level=logging.INFO,
                operation=operation_name,
                attempt=attempt_count,
            )

    async def wrapped_operation() -> T:
        return await operation(attempt_count)

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=multiplier, max=max_wait),
        retry=retry_if_exception_type(retry_on),
        before=before_attempt,
        reraise=True,
    )

    try:
        return await retrying(wrapped_operation)
    except retry_on as e:
        logger.log_event(
            "retry",
            "exhausted",
            level=logging.ERROR,
            operation=operation_name,
            attempts=max_attempts,
        )
        log_error(
            f"All retry attempts exhausted for {operation_name}",
            e,
            context={"max_attempts": max_attempts},
        )
        raise RetryExhaustedError(
            f"{operation_name} failed after {max_attempts} attempts",
            attempts=max_attempts,
            final_exception=e,
        ) from e
