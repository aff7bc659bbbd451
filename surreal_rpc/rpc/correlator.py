"""Request id allocation and the pending-request correlation table."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections.abc import Callable

from surreal_rpc.state import PendingRequest
from surreal_rpc.errors import ProtocolError, RequestIdExhaustedError
from surreal_rpc.config.rpc import RPC_KEY_ERROR, RPC_KEY_RESULT, REQUEST_ID_CEILING

logger = logging.getLogger(__name__)


class RequestCorrelator:
    """Map request ids to the futures their callers are waiting on.

    Ids cycle through ``[0, ceiling)``. An id that still has a pending entry
    is skipped, so wraparound never hands out an id twice while it is in
    flight. Every completion path removes the entry before the future is
    settled, so each entry fires exactly once.
    """

    def __init__(self, *, ceiling: int = REQUEST_ID_CEILING) -> None:
        self._ceiling = max(1, int(ceiling))
        self._next_id = 0
        self._pending: dict[int, PendingRequest] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, request_id: object) -> bool:
        return request_id in self._pending

    def allocate(self) -> int:
        for _ in range(self._ceiling):
            candidate = self._next_id
            self._next_id = (candidate + 1) % self._ceiling
            if candidate not in self._pending:
                return candidate
        raise RequestIdExhaustedError(
            f"all {self._ceiling} request ids are waiting for a response",
            {"pending": len(self._pending)},
        )

    def register(
        self,
        request_id: int,
        method: str,
        envelope: str,
        *,
        transport: Any = None,
    ) -> asyncio.Future[Any]:
        if request_id in self._pending:
            raise RuntimeError(f"request id {request_id} is already pending")
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._pending[request_id] = PendingRequest(
            request_id=request_id,
            method=method,
            envelope=envelope,
            future=future,
            transport=transport,
        )
        return future

    def _take(self, request_id: int) -> PendingRequest | None:
        entry = self._pending.pop(request_id, None)
        if entry is None:
            logger.warning("No pending request for id %s; dropping frame", request_id)
        return entry

    def resolve(self, request_id: int, value: Any) -> bool:
        entry = self._take(request_id)
        if entry is None:
            return False
        if not entry.future.done():
            entry.future.set_result(value)
        return True

    def reject(self, request_id: int, exc: BaseException) -> bool:
        entry = self._take(request_id)
        if entry is None:
            return False
        if not entry.future.done():
            entry.future.set_exception(exc)
        return True

    def complete(self, request_id: int, frame: dict[str, Any]) -> bool:
        """Settle *request_id* from a response frame (``error`` rejects, anything else resolves)."""
        entry = self._take(request_id)
        if entry is None:
            return False
        if entry.future.done():
            # The caller stopped waiting (cancelled or timed out).
            return True
        try:
            error = frame.get(RPC_KEY_ERROR)
            if error is not None:
                entry.future.set_exception(ProtocolError.from_payload(error, entry.envelope))
            else:
                entry.future.set_result(frame.get(RPC_KEY_RESULT))
        except Exception as exc:
            if not entry.future.done():
                entry.future.set_exception(exc)
        return True

    def discard(self, request_id: int, future: asyncio.Future[Any]) -> None:
        entry = self._pending.get(request_id)
        if entry is not None and entry.future is future:
            del self._pending[request_id]

    def fail_all(self, exc_factory: Callable[[], BaseException], *, transport: Any = None) -> int:
        """Reject pending entries; with *transport*, only those sent on it."""
        entries = [
            entry for entry in self._pending.values() if transport is None or entry.transport is transport
        ]
        for entry in entries:
            del self._pending[entry.request_id]
        failed = 0
        for entry in entries:
            if not entry.future.done():
                entry.future.set_exception(exc_factory())
                failed += 1
        return failed


__all__ = ["RequestCorrelator"]
