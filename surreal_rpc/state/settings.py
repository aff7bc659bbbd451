"""Client settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass, field

from surreal_rpc.config.websocket import (
    DEFAULT_SURREAL_URL,
    DEFAULT_WS_OPEN_TIMEOUT_S,
    DEFAULT_WS_PING_TIMEOUT_S,
    DEFAULT_REQUEST_TIMEOUT_S,
    DEFAULT_WS_CLOSE_TIMEOUT_S,
    DEFAULT_WS_PING_INTERVAL_S,
    DEFAULT_WS_MAX_MESSAGE_BYTES,
)


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    open_timeout_s: float = DEFAULT_WS_OPEN_TIMEOUT_S
    close_timeout_s: float = DEFAULT_WS_CLOSE_TIMEOUT_S
    ping_interval_s: float = DEFAULT_WS_PING_INTERVAL_S
    ping_timeout_s: float = DEFAULT_WS_PING_TIMEOUT_S
    max_message_bytes: int = DEFAULT_WS_MAX_MESSAGE_BYTES
    request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S


@dataclass(frozen=True, slots=True)
class ClientSettings:
    url: str = DEFAULT_SURREAL_URL
    namespace: str | None = None
    database: str | None = None
    log: bool = False
    websocket: WebSocketSettings = field(default_factory=WebSocketSettings)

    @property
    def scoped(self) -> bool:
        return bool(self.namespace) and bool(self.database)


__all__ = ["ClientSettings", "WebSocketSettings"]
