"""Lazy connection establishment and post-connect session scoping."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable, Awaitable

from surreal_rpc.state import TransportState

logger = logging.getLogger(__name__)

TransportFactory = Callable[[], Any]
OpenHook = Callable[[Any], Awaitable[None]]


class SessionManager:
    """Own the current transport and make sure it is open and scoped before use.

    ``ensure_ready`` serializes connection setup behind a lock, so concurrent
    first calls share one connection attempt. The *on_open* hook runs on the
    fresh transport before any waiting caller is released; it is how the
    namespace/database ``use`` call gets onto the wire first.
    """

    def __init__(
        self,
        transport_factory: TransportFactory,
        *,
        on_open: OpenHook | None = None,
        log: bool = False,
    ) -> None:
        self._transport_factory = transport_factory
        self._on_open = on_open
        self._log_level = logging.INFO if log else logging.DEBUG
        self._transport: Any = None
        self._ready = False
        self._connects = 0
        self._lock = asyncio.Lock()

    @property
    def state(self) -> TransportState:
        if self._transport is None:
            return TransportState.ABSENT
        return self._transport.state

    @property
    def transport(self) -> Any:
        return self._transport

    @property
    def connect_count(self) -> int:
        return self._connects

    def _is_ready(self) -> bool:
        return self._ready and self._transport is not None and self._transport.is_open

    async def ensure_ready(self) -> Any:
        if self._is_ready():
            return self._transport

        async with self._lock:
            if self._is_ready():
                return self._transport

            transport = self._transport_factory()
            self._connects += 1
            if self._connects == 1:
                logger.log(self._log_level, "[Surreal] new WebSocket %s", transport.url)
            else:
                logger.log(
                    self._log_level, "[Surreal] reconnecting WebSocket %s (attempt %d)", transport.url, self._connects
                )

            self._ready = False
            self._transport = transport
            try:
                await transport.open()
            except BaseException:
                self._transport = None
                raise

            if self._on_open is not None:
                try:
                    await self._on_open(transport)
                except BaseException:
                    # Leave nothing half-initialized behind: the next call starts over.
                    with contextlib.suppress(Exception):
                        await transport.close()
                    self._transport = None
                    raise

            self._ready = True
            return transport

    async def close(self) -> None:
        self._ready = False
        transport = self._transport
        if transport is None:
            return
        logger.log(self._log_level, "[Surreal] closing WebSocket %s", transport.url)
        await transport.close()


__all__ = ["OpenHook", "SessionManager", "TransportFactory"]
