"""Outbound line builders.

Inputs are written as given: nothing is escaped or validated. Callers must
not pass CR/LF anywhere, nor spaces in values that end up as middle
parameters.
"""

from __future__ import annotations

from .parser import PREFIX_SENTINEL, SPACE, TAGS_SENTINEL, TRAIL_SENTINEL

LINE_TERMINATOR = "\n"


def format_line(
    command: str,
    *params: str,
    trailing: str | None = None,
    tags: str | None = None,
    sender: str | None = None,
) -> str:
    """Build a single wire line without its terminator.

    ``trailing`` is emitted with its ``:`` sentinel whenever it is not
    ``None``, including the empty string.
    """
    parts: list[str] = []
    if tags is not None:
        parts.append(TAGS_SENTINEL + tags)
    if sender is not None:
        parts.append(PREFIX_SENTINEL + sender)
    parts.append(command)
    parts.extend(params)
    if trailing is not None:
        parts.append(TRAIL_SENTINEL + trailing)
    return SPACE.join(parts)


def _line(command: str, *params: str, trailing: str | None = None) -> str:
    return format_line(command, *params, trailing=trailing) + LINE_TERMINATOR


def identity(nickname: str) -> str:
    """NICK followed by USER, with the nickname as user name and real name."""
    return _line("NICK", nickname) + _line(
        "USER", nickname, "0", "*", trailing=nickname
    )


def authenticate(password: str) -> str:
    return _line("PASS", password)


def join(channel: str) -> str:
    return _line("JOIN", channel)


def keepalive_reply(token: str) -> str:
    return _line("PONG", trailing=token)


def send_message(target: str, text: str) -> str:
    return _line("PRIVMSG", target, trailing=text)
