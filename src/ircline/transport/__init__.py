"""Connection glue around the line grammar."""

from .client import IRCClient, open_client  # noqa: F401

__all__ = ["IRCClient", "open_client"]
