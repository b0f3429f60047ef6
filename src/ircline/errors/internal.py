"""Centralized internal error hierarchy.

These exceptions give callers semantic categories to branch on instead of
inspecting message text. Transport code wraps raw OSError / timeout failures
into NetworkError before they leave the package.

Classes:
  InternalError        – Base for all internal errors.
  ParsingError         – A line or value could not be parsed.
  InvalidMessage       – A protocol line has no extractable command token.
  NetworkError         – Transient network/IO issues (safe to retry).
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParsingError(InternalError):
    """Exception raised when input cannot be parsed into a structured value."""


class InvalidMessage(ParsingError):
    """Raised when a line has no command token to extract.

    The offending line is kept verbatim on ``line`` (and in ``data``) so the
    caller can decide whether to skip it, log it, or drop the connection.

    Args:
        line: The original input line that failed to parse.
    """

    def __init__(self, line: str) -> None:
        super().__init__(f"Invalid IRC message: {line!r}", data={"line": line})
        self.line = line


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors.

    This includes connection refusals, timeouts and resets that may be
    retried.
    """


__all__ = [
    "InternalError",
    "ParsingError",
    "InvalidMessage",
    "NetworkError",
]
