"""Parser and line builders for IRC-style chat protocol lines.

The grammar core (``ircline.irc``) is pure and synchronous; the optional
``ircline.transport`` client wires it to an asyncio stream pair.
"""

from .config import ClientConfig
from .errors import InternalError, InvalidMessage, NetworkError, ParsingError
from .irc import (
    Message,
    PrivMsg,
    SenderParts,
    authenticate,
    build_privmsg,
    format_line,
    identity,
    join,
    keepalive_reply,
    parse,
    parse_tags,
    send_message,
    split_sender,
)
from .transport import IRCClient, open_client

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "IRCClient",
    "InternalError",
    "InvalidMessage",
    "Message",
    "NetworkError",
    "ParsingError",
    "PrivMsg",
    "SenderParts",
    "authenticate",
    "build_privmsg",
    "format_line",
    "identity",
    "join",
    "keepalive_reply",
    "open_client",
    "parse",
    "parse_tags",
    "send_message",
    "split_sender",
]
