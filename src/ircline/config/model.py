from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..constants import IRC_CONNECT_MAX_ATTEMPTS, IRC_CONNECT_TIMEOUT, IRC_DEFAULT_PORT


class ClientConfig(BaseModel):
    """Connection settings for a single IRC client.

    Attributes:
        host: Server hostname or address.
        port: Server TCP port.
        nickname: Nickname sent during registration.
        password: Optional server password sent as PASS before NICK/USER.
        channels: Channels to JOIN after registration, in order.
        connect_timeout: Seconds allowed for a single connection attempt.
        max_attempts: Connection attempts before giving up.
    """

    host: str = Field(min_length=1)
    port: int = Field(default=IRC_DEFAULT_PORT, ge=1, le=65535)
    nickname: str = Field(min_length=1)
    password: str | None = None
    channels: list[str] = Field(default_factory=list)
    connect_timeout: float = Field(default=IRC_CONNECT_TIMEOUT, gt=0)
    max_attempts: int = Field(default=IRC_CONNECT_MAX_ATTEMPTS, ge=1)

    @field_validator("host", "nickname", mode="before")
    @classmethod
    def strip_value(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("nickname")
    @classmethod
    def validate_nickname(cls, v: str) -> str:
        # A nickname is sent as a middle parameter and must stay one token.
        if " " in v or v.startswith(":"):
            raise ValueError("nickname must be a single token not starting with ':'")
        return v

    @field_validator("channels", mode="before")
    @classmethod
    def validate_channels(cls, v: Any) -> list[str]:
        """Strip whitespace, drop empties and duplicates, keep order.

        The channel prefix ('#', '&', ...) is part of the name and is kept.
        """
        if not isinstance(v, list):
            raise ValueError("channels must be a list")
        validated = []
        for c in v:
            if isinstance(c, str):
                stripped = c.strip()
                if stripped:
                    validated.append(stripped)
        return list(dict.fromkeys(validated))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClientConfig:
        return cls.model_validate(dict(data))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

    @property
    def peer(self) -> str:
        return f"{self.host}:{self.port}"
