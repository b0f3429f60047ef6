"""Utility helpers shared by the transport layer."""

from .retry import RetryExhaustedError, retry_async

__all__ = ["RetryExhaustedError", "retry_async"]
