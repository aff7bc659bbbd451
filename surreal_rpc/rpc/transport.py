"""WebSocket transport: one duplex connection delivering text frames and lifecycle events."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from collections.abc import Callable

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from surreal_rpc.errors import TransportError
from surreal_rpc.state import TransportState, WebSocketSettings
from surreal_rpc.config.websocket import WS_CLOSE_NORMAL_CODE, WS_CLOSE_NORMAL_REASON

logger = logging.getLogger(__name__)

FrameHandler = Callable[[str | bytes], None]
CloseHandler = Callable[[str], None]


def _seconds_or_none(value: float) -> float | None:
    return value if value > 0 else None


class WebSocketTransport:
    """Own a single ``websockets`` client connection.

    Inbound frames are handed to *on_message* from a background reader task.
    When the connection ends, for any reason, *on_close* is called once with a
    human-readable reason and the transport stays ``CLOSED``; a transport is
    never reopened.
    """

    def __init__(
        self,
        url: str,
        *,
        on_message: FrameHandler,
        on_close: CloseHandler,
        settings: WebSocketSettings | None = None,
    ) -> None:
        self._url = url
        self._on_message = on_message
        self._on_close = on_close
        self._settings = settings or WebSocketSettings()
        self._ws: websockets.ClientConnection | None = None
        self._reader: asyncio.Task | None = None
        self._state = TransportState.ABSENT

    @property
    def url(self) -> str:
        return self._url

    @property
    def state(self) -> TransportState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is TransportState.OPEN

    async def open(self) -> None:
        if self._state is not TransportState.ABSENT:
            raise TransportError(f"transport for {self._url} cannot be reopened (state={self._state.value})")

        self._state = TransportState.CONNECTING
        settings = self._settings
        try:
            self._ws = await websockets.connect(
                self._url,
                open_timeout=_seconds_or_none(settings.open_timeout_s),
                close_timeout=_seconds_or_none(settings.close_timeout_s),
                ping_interval=_seconds_or_none(settings.ping_interval_s),
                ping_timeout=_seconds_or_none(settings.ping_timeout_s),
                max_size=settings.max_message_bytes,
            )
        except (OSError, TimeoutError, WebSocketException) as exc:
            self._state = TransportState.ABSENT
            raise TransportError(f"failed to connect to {self._url}: {exc}", exc) from exc

        self._state = TransportState.OPEN
        self._reader = asyncio.create_task(self._read_loop())

    async def send(self, text: str) -> None:
        ws = self._ws
        if ws is None or self._state is not TransportState.OPEN:
            raise TransportError(f"connection to {self._url} is not open", {"state": self._state.value})
        try:
            await ws.send(text)
        except ConnectionClosed as exc:
            raise TransportError(f"connection to {self._url} closed while sending: {exc}", exc) from exc

    async def close(self) -> None:
        ws = self._ws
        if ws is None:
            return
        with contextlib.suppress(Exception):
            await ws.close(code=WS_CLOSE_NORMAL_CODE, reason=WS_CLOSE_NORMAL_REASON)
        reader = self._reader
        if reader is not None and reader is not asyncio.current_task():
            with contextlib.suppress(Exception):
                await reader

    def _close_reason(self) -> str:
        ws = self._ws
        if ws is None:
            return "connection closed"
        code = ws.close_code
        reason = ws.close_reason
        if code is None:
            return "connection lost"
        return f"code={code} reason={reason or ''}"

    async def _read_loop(self) -> None:
        ws = self._ws
        if ws is None:
            return
        try:
            async for raw in ws:
                try:
                    self._on_message(raw)
                except Exception:
                    logger.exception("inbound frame handler failed")
        except ConnectionClosed:
            pass
        except Exception:
            logger.debug("reader for %s exiting due to unexpected error", self._url, exc_info=True)
        finally:
            self._state = TransportState.CLOSED
            self._on_close(self._close_reason())


__all__ = ["CloseHandler", "FrameHandler", "WebSocketTransport"]
