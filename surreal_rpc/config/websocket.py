"""WebSocket connection configuration (env names and defaults)."""

from __future__ import annotations

ENV_SURREAL_URL = "SURREAL_URL"
DEFAULT_SURREAL_URL = "ws://127.0.0.1:8000/rpc"

ENV_WS_OPEN_TIMEOUT_S = "SURREAL_WS_OPEN_TIMEOUT_S"
DEFAULT_WS_OPEN_TIMEOUT_S = 10.0

ENV_WS_CLOSE_TIMEOUT_S = "SURREAL_WS_CLOSE_TIMEOUT_S"
DEFAULT_WS_CLOSE_TIMEOUT_S = 10.0

# Library keepalive pings; <= 0 disables them.
ENV_WS_PING_INTERVAL_S = "SURREAL_WS_PING_INTERVAL_S"
DEFAULT_WS_PING_INTERVAL_S = 20.0

ENV_WS_PING_TIMEOUT_S = "SURREAL_WS_PING_TIMEOUT_S"
DEFAULT_WS_PING_TIMEOUT_S = 20.0

ENV_WS_MAX_MESSAGE_BYTES = "SURREAL_WS_MAX_MESSAGE_BYTES"
DEFAULT_WS_MAX_MESSAGE_BYTES = 32 * 1024 * 1024

# Per-request wait; <= 0 waits forever.
ENV_REQUEST_TIMEOUT_S = "SURREAL_REQUEST_TIMEOUT_S"
DEFAULT_REQUEST_TIMEOUT_S = 0.0

# Close codes
WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_NORMAL_REASON = "client closed"

__all__ = [
    "ENV_SURREAL_URL",
    "DEFAULT_SURREAL_URL",
    "ENV_WS_OPEN_TIMEOUT_S",
    "DEFAULT_WS_OPEN_TIMEOUT_S",
    "ENV_WS_CLOSE_TIMEOUT_S",
    "DEFAULT_WS_CLOSE_TIMEOUT_S",
    "ENV_WS_PING_INTERVAL_S",
    "DEFAULT_WS_PING_INTERVAL_S",
    "ENV_WS_PING_TIMEOUT_S",
    "DEFAULT_WS_PING_TIMEOUT_S",
    "ENV_WS_MAX_MESSAGE_BYTES",
    "DEFAULT_WS_MAX_MESSAGE_BYTES",
    "ENV_REQUEST_TIMEOUT_S",
    "DEFAULT_REQUEST_TIMEOUT_S",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_NORMAL_REASON",
]
