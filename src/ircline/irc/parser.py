"""IRC message parsing utilities.

Lines are scanned left to right over five ordered segments::

    [@<tags> ][:<sender> ]<command>[ <param>]*[ :<trailing>]

Only ASCII space separates segments. Runs of spaces between segments
collapse, so ``"foo  bar"`` has a single parameter ``bar``; spaces inside the
trailing parameter are kept verbatim.
"""

from __future__ import annotations

from ..errors.internal import InvalidMessage
from .models import Message, PrivMsg, SenderParts

SPACE = " "
LINE_ENDINGS = "\r\n"
TAGS_SENTINEL = "@"
TAGS_SEP = ";"
TAG_VALUE_SEP = "="
PREFIX_SENTINEL = ":"
PREFIX_USER_SEP = "!"
PREFIX_HOST_SEP = "@"
TRAIL_SENTINEL = ":"


def _skip_spaces(line: str, pos: int) -> int:
    end = len(line)
    while pos < end and line[pos] == SPACE:
        pos += 1
    return pos


def _read_token(line: str, pos: int) -> tuple[str, int]:
    end = line.find(SPACE, pos)
    if end == -1:
        end = len(line)
    return line[pos:end], end


def parse(line: str) -> Message:
    """Parse one protocol line into a :class:`Message`.

    A trailing run of CR/LF is ignored. Raises :class:`InvalidMessage` when
    the line holds no command token: empty or blank lines, and lines made
    only of a tags and/or sender segment.
    """
    body = line.rstrip(LINE_ENDINGS)
    pos = _skip_spaces(body, 0)

    tags: str | None = None
    if body.startswith(TAGS_SENTINEL, pos):
        tags, pos = _read_token(body, pos + 1)
        pos = _skip_spaces(body, pos)

    sender: str | None = None
    if body.startswith(PREFIX_SENTINEL, pos):
        sender, pos = _read_token(body, pos + 1)
        pos = _skip_spaces(body, pos)

    if pos >= len(body):
        raise InvalidMessage(line)
    command, pos = _read_token(body, pos)

    parameters: list[str] = []
    while True:
        pos = _skip_spaces(body, pos)
        if pos >= len(body):
            break
        if body[pos] == TRAIL_SENTINEL:
            # Everything after the sentinel, colons and spaces included.
            parameters.append(body[pos + 1 :])
            break
        param, pos = _read_token(body, pos)
        parameters.append(param)

    return Message(
        tags=tags,
        sender=sender,
        command=command,
        parameters=tuple(parameters),
        raw_source=line,
    )


def parse_tags(raw_tags: str | None) -> dict[str, str]:
    """Split a raw tag blob into a mapping.

    Values are returned as sent; escape sequences are not decoded. A key
    without ``=`` maps to an empty string, and a repeated key keeps its last
    value.
    """
    tags: dict[str, str] = {}
    if not raw_tags:
        return tags
    for tag in raw_tags.split(TAGS_SEP):
        if not tag:
            continue
        key, _, value = tag.partition(TAG_VALUE_SEP)
        tags[key] = value
    return tags


def split_sender(sender: str | None) -> SenderParts:
    """Split ``nick!user@host`` into its parts.

    A bare server name comes back entirely in ``nick``.
    """
    if sender is None:
        return SenderParts()
    nick, bang, rest = sender.partition(PREFIX_USER_SEP)
    if bang:
        user, at, host = rest.partition(PREFIX_HOST_SEP)
        return SenderParts(nick=nick, user=user, host=host if at else None)
    nick, at, host = sender.partition(PREFIX_HOST_SEP)
    return SenderParts(nick=nick, host=host if at else None)


def build_privmsg(parsed: Message) -> PrivMsg | None:
    if parsed.command.upper() != "PRIVMSG":
        return None
    if len(parsed.parameters) < 2:
        return None
    # Author from prefix (nick!user@host)
    author = split_sender(parsed.sender).nick or "?"
    return PrivMsg(
        author=author,
        target=parsed.parameters[0],
        text=parsed.parameters[-1],
        tags=parse_tags(parsed.tags),
    )
