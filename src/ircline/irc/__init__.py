"""IRC line grammar package.

Contains the message model, the parser and the outbound line builders.
"""

from .formatter import (  # noqa: F401
    authenticate,
    format_line,
    identity,
    join,
    keepalive_reply,
    send_message,
)
from .models import Message, PrivMsg, SenderParts  # noqa: F401
from .parser import build_privmsg, parse, parse_tags, split_sender  # noqa: F401

__all__ = [
    "Message",
    "PrivMsg",
    "SenderParts",
    "parse",
    "parse_tags",
    "split_sender",
    "build_privmsg",
    "format_line",
    "identity",
    "authenticate",
    "join",
    "keepalive_reply",
    "send_message",
]
