"""
Configuration constants for ircline

This module contains the tunables used by the transport client.
Each constant can be overridden by setting an environment variable with the same name.
"""

import logging
import os

_log = logging.getLogger(__name__)


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            _log.warning(
                f"Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            _log.warning(
                f"Invalid float value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


# Connection establishment
IRC_DEFAULT_PORT = _get_env_int("IRC_DEFAULT_PORT", 6667)
IRC_CONNECT_TIMEOUT = _get_env_float("IRC_CONNECT_TIMEOUT", 15.0)
IRC_CONNECT_MAX_ATTEMPTS = _get_env_int("IRC_CONNECT_MAX_ATTEMPTS", 3)
IRC_RETRY_MAX_WAIT = _get_env_float("IRC_RETRY_MAX_WAIT", 30.0)

# Line handling
IRC_LINE_ENCODING = _get_env_str("IRC_LINE_ENCODING", "utf-8")
# asyncio.StreamReader buffer limit; a single line may not exceed this.
IRC_STREAM_LIMIT = _get_env_int("IRC_STREAM_LIMIT", 64 * 1024)
