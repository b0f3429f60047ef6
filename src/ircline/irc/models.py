"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Message:
    """One parsed protocol line.

    ``tags`` and ``sender`` are the raw segment contents (without the
    leading ``@`` / ``:``) or ``None`` when the segment was absent.
    ``parameters`` holds the middle parameters in order followed by the
    trailing parameter, if the line had one.
    """

    tags: str | None
    sender: str | None
    command: str
    parameters: tuple[str, ...] = ()
    raw_source: str = ""

    @property
    def trailing(self) -> str | None:
        return self.parameters[-1] if self.parameters else None

    def tag_map(self) -> dict[str, str]:
        from .parser import parse_tags

        return parse_tags(self.tags)

    def sender_parts(self) -> SenderParts:
        from .parser import split_sender

        return split_sender(self.sender)

    def to_line(self) -> str:
        """Serialize back to a wire line (no terminator).

        The last parameter is always written as a trailing parameter, so the
        result re-parses to the same command and parameters even when the
        original line used only middles.
        """
        from .formatter import format_line

        middles = self.parameters[:-1]
        trailing = self.parameters[-1] if self.parameters else None
        return format_line(
            self.command,
            *middles,
            trailing=trailing,
            tags=self.tags,
            sender=self.sender,
        )


@dataclass(frozen=True, slots=True)
class SenderParts:
    nick: str | None = None
    user: str | None = None
    host: str | None = None


@dataclass(frozen=True, slots=True)
class PrivMsg:
    author: str
    target: str
    text: str
    tags: dict[str, str] = field(default_factory=dict, hash=False)
