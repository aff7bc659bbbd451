"""Outbound request dispatch: envelope, registration, send, await."""

from __future__ import annotations

import asyncio
from typing import Any

from surreal_rpc.errors import RequestTimeoutError

from .session import SessionManager
from .correlator import RequestCorrelator
from .envelope import Params, build_request


class Dispatcher:
    def __init__(
        self,
        session: SessionManager,
        correlator: RequestCorrelator,
        *,
        request_timeout_s: float = 0.0,
    ) -> None:
        self._session = session
        self._correlator = correlator
        self._request_timeout_s = max(0.0, float(request_timeout_s))

    async def send(self, method: str, params: Params = None) -> Any:
        """Make sure the connection is ready, then issue one request and return its ``result``."""
        transport = await self._session.ensure_ready()
        return await self.call(transport, method, params)

    async def call(self, transport: Any, method: str, params: Params = None) -> Any:
        """Issue one request on an already-open *transport*.

        Server-side errors surface as :class:`ProtocolError` raised from the
        awaited future; the pending entry is gone by the time this returns or
        raises, whatever the outcome.
        """
        request_id = self._correlator.allocate()
        envelope = build_request(request_id, method, params)
        future = self._correlator.register(request_id, method, envelope, transport=transport)
        try:
            await transport.send(envelope)
            if self._request_timeout_s > 0:
                try:
                    return await asyncio.wait_for(future, timeout=self._request_timeout_s)
                except TimeoutError as exc:
                    raise RequestTimeoutError(
                        f"no response to {method!r} (id={request_id}) within {self._request_timeout_s:.1f}s",
                        {"request": envelope},
                    ) from exc
            return await future
        finally:
            self._correlator.discard(request_id, future)


__all__ = ["Dispatcher"]
