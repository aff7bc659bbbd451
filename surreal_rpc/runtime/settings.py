"""Environment parsing for client settings."""

from __future__ import annotations

import os

from surreal_rpc.state.settings import ClientSettings, WebSocketSettings
from surreal_rpc.config.session import (
    ENV_SURREAL_LOG,
    DEFAULT_SURREAL_LOG,
    ENV_SURREAL_DATABASE,
    ENV_SURREAL_NAMESPACE,
)
from surreal_rpc.config.websocket import (
    ENV_SURREAL_URL,
    DEFAULT_SURREAL_URL,
    ENV_REQUEST_TIMEOUT_S,
    ENV_WS_OPEN_TIMEOUT_S,
    ENV_WS_PING_TIMEOUT_S,
    ENV_WS_CLOSE_TIMEOUT_S,
    ENV_WS_PING_INTERVAL_S,
    ENV_WS_MAX_MESSAGE_BYTES,
    DEFAULT_WS_OPEN_TIMEOUT_S,
    DEFAULT_WS_PING_TIMEOUT_S,
    DEFAULT_REQUEST_TIMEOUT_S,
    DEFAULT_WS_CLOSE_TIMEOUT_S,
    DEFAULT_WS_PING_INTERVAL_S,
    DEFAULT_WS_MAX_MESSAGE_BYTES,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _optional_str_env(name: str) -> str | None:
    v = (os.getenv(name) or "").strip()
    return v or None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def load_websocket_settings() -> WebSocketSettings:
    max_message_bytes = _int_env(ENV_WS_MAX_MESSAGE_BYTES, DEFAULT_WS_MAX_MESSAGE_BYTES)
    if max_message_bytes <= 0:
        max_message_bytes = DEFAULT_WS_MAX_MESSAGE_BYTES

    return WebSocketSettings(
        open_timeout_s=_float_env(ENV_WS_OPEN_TIMEOUT_S, DEFAULT_WS_OPEN_TIMEOUT_S),
        close_timeout_s=_float_env(ENV_WS_CLOSE_TIMEOUT_S, DEFAULT_WS_CLOSE_TIMEOUT_S),
        ping_interval_s=_float_env(ENV_WS_PING_INTERVAL_S, DEFAULT_WS_PING_INTERVAL_S),
        ping_timeout_s=_float_env(ENV_WS_PING_TIMEOUT_S, DEFAULT_WS_PING_TIMEOUT_S),
        max_message_bytes=max_message_bytes,
        request_timeout_s=_float_env(ENV_REQUEST_TIMEOUT_S, DEFAULT_REQUEST_TIMEOUT_S),
    )


def load_settings() -> ClientSettings:
    return ClientSettings(
        url=_str_env(ENV_SURREAL_URL, DEFAULT_SURREAL_URL),
        namespace=_optional_str_env(ENV_SURREAL_NAMESPACE),
        database=_optional_str_env(ENV_SURREAL_DATABASE),
        log=_bool_env(ENV_SURREAL_LOG, DEFAULT_SURREAL_LOG),
        websocket=load_websocket_settings(),
    )


__all__ = ["load_settings", "load_websocket_settings"]
