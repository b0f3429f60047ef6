"""Asyncio line client: streams parsed messages and writes formatted commands."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator

from ..config.model import ClientConfig
from ..constants import IRC_LINE_ENCODING, IRC_STREAM_LIMIT
from ..errors.handling import log_error
from ..errors.internal import InvalidMessage, NetworkError, ParsingError
from ..irc import formatter
from ..irc.models import Message
from ..irc.parser import LINE_ENDINGS, parse
from ..logs.logger import logger
from ..utils.retry import RetryExhaustedError, retry_async


class IRCClient:
    """Wrap an asyncio stream pair carrying IRC lines.

    ``messages()`` is a lazy, single-pass sequence in wire order. Unparseable
    lines are logged and skipped unless ``strict`` is set, in which case the
    ``InvalidMessage`` propagates to the consumer. Lines longer than the
    stream limit are handled the same way (``ParsingError`` when strict);
    read failures surface as ``NetworkError``.
    """

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        *,
        strict: bool = False,
        encoding: str = IRC_LINE_ENCODING,
        peer: str | None = None,
    ) -> None:
        self.reader = reader
        self.writer: asyncio.StreamWriter | None = writer
        self.strict = strict
        self.encoding = encoding
        self.peer = peer

    async def __aenter__(self) -> IRCClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def messages(self) -> AsyncIterator[Message]:
        while True:
            try:
                raw = await self.reader.readline()
            except ValueError as e:
                # StreamReader already discarded the overlong chunk.
                if self.strict:
                    raise ParsingError(
                        f"Line exceeds stream limit: {e}", data={"peer": self.peer}
                    ) from e
                logger.log_event(
                    "irc",
                    "line_too_long",
                    level=logging.WARNING,
                    peer=self.peer,
                    error=str(e),
                )
                continue
            except (ConnectionError, OSError) as e:
                log_error(
                    "Failed to read from connection", e, context={"peer": self.peer}
                )
                raise NetworkError(f"Read failed: {e}", data={"peer": self.peer}) from e
            if not raw:
                logger.log_event("irc", "eof", level=logging.DEBUG, peer=self.peer)
                return
            line = raw.decode(self.encoding, errors="replace")
            if not line.rstrip(LINE_ENDINGS):
                continue
            logger.log_event(
                "irc",
                "receive",
                level=logging.DEBUG,
                peer=self.peer,
                line=line.rstrip(LINE_ENDINGS),
            )
            try:
                message = parse(line)
            except InvalidMessage as e:
                if self.strict:
                    raise
                logger.log_event(
                    "irc",
                    "invalid_line",
                    level=logging.WARNING,
                    peer=self.peer,
                    line=e.line,
                )
                continue
            yield message

    async def send(self, text: str) -> None:
        if self.writer is None:
            raise NetworkError("Connection is closed", data={"peer": self.peer})
        logger.log_event(
            "irc",
            "send",
            level=logging.DEBUG,
            peer=self.peer,
            text=_mask_secrets(text).rstrip(LINE_ENDINGS),
        )
        self.writer.write(text.encode(self.encoding))
        try:
            await self.writer.drain()
        except (ConnectionError, OSError) as e:
            log_error("Failed to write to connection", e, context={"peer": self.peer})
            raise NetworkError(f"Write failed: {e}", data={"peer": self.peer}) from e

    async def nick(self, nickname: str) -> None:
        await self.send(formatter.identity(nickname))

    async def pass_(self, password: str) -> None:
        await self.send(formatter.authenticate(password))

    async def join(self, channel: str) -> None:
        await self.send(formatter.join(channel))

    async def pong(self, token: str) -> None:
        await self.send(formatter.keepalive_reply(token))

    async def privmsg(self, target: str, text: str) -> None:
        await self.send(formatter.send_message(target, text))

    async def register(self, config: ClientConfig) -> None:
        """Send PASS (if configured), NICK/USER, then one JOIN per channel."""
        logger.log_event(
            "irc",
            "register",
            peer=self.peer,
            nickname=config.nickname,
            channels=len(config.channels),
        )
        if config.password:
            await self.pass_(config.password)
        await self.nick(config.nickname)
        for channel in config.channels:
            await self.join(channel)

    async def close(self) -> None:
        writer, self.writer = self.writer, None
        if writer is None:
            return
        try:
            writer.close()
            await writer.wait_closed()
        except (ConnectionError, OSError) as e:
            log_error("Error while closing connection", e, context={"peer": self.peer})
        logger.log_event("irc", "closed", level=logging.DEBUG, peer=self.peer)


def _mask_secrets(text: str) -> str:
    lines = text.split("\n")
    return "\n".join(
        "PASS ****" if line.startswith("PASS ") else line for line in lines
    )


async def open_client(
    config: ClientConfig, *, strict: bool = False, backoff: float = 1.0
) -> IRCClient:
    """Connect to ``config.host:config.port`` and return an :class:`IRCClient`.

    Connection attempts are retried with exponential backoff; once
    ``config.max_attempts`` are used up a :class:`NetworkError` is raised.
    ``backoff`` is the exponential backoff multiplier in seconds.
    """
    logger.log_event(
        "irc", "connect_start", peer=config.peer, host=config.host, port=config.port
    )

    async def attempt(number: int) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
        try:
            return await asyncio.wait_for(
                asyncio.open_connection(
                    config.host, config.port, limit=IRC_STREAM_LIMIT
                ),
                timeout=config.connect_timeout,
            )
        except (OSError, TimeoutError) as e:
            logger.log_event(
                "irc",
                "connect_attempt_failed",
                level=logging.WARNING,
                peer=config.peer,
                host=config.host,
                port=config.port,
                attempt=number,
                error=str(e) or type(e).__name__,
            )
            raise

    try:
        reader, writer = await retry_async(
            attempt,
            max_attempts=config.max_attempts,
            operation_name=f"connect {config.peer}",
            multiplier=backoff,
        )
    except RetryExhaustedError as e:
        logger.log_event(
            "irc",
            "connect_failed",
            level=logging.ERROR,
            peer=config.peer,
            host=config.host,
            port=config.port,
            attempts=e.attempts,
        )
        raise NetworkError(
            f"Could not connect to {config.peer}",
            data={"attempts": e.attempts, "error": str(e.final_exception)},
        ) from e

    logger.log_event(
        "irc", "connect_success", peer=config.peer, host=config.host, port=config.port
    )
    return IRCClient(reader, writer, strict=strict, peer=config.peer)
