"""Shared error types for the SurrealDB RPC driver."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass

from surreal_rpc.config.rpc import RPC_ERROR_KEY_MESSAGE, RPC_ERROR_KEY_REQUEST


@dataclass(eq=False, slots=True)
class SurrealError(Exception):
    """Base failure raised by the driver; ``detail`` carries diagnostic context."""

    message: str
    detail: Any = None

    def __str__(self) -> str:
        return self.message


class TransportError(SurrealError):
    """The connection could not be opened, or was lost while a call was pending."""


class RequestTimeoutError(TransportError):
    """No response arrived within the configured request timeout."""


class ProtocolError(SurrealError):
    """A well-formed response frame carried a server-side ``error``."""

    @classmethod
    def from_payload(cls, error: Any, request: str) -> ProtocolError:
        if isinstance(error, dict):
            detail = dict(error)
            message = detail.get(RPC_ERROR_KEY_MESSAGE)
        else:
            detail = {RPC_ERROR_KEY_MESSAGE: error}
            message = error
        detail[RPC_ERROR_KEY_REQUEST] = request
        return cls(str(message) if message is not None else "unknown server error", detail)


class BatchError(SurrealError):
    """One or more statements of a batched query failed."""


class MalformedFrameError(SurrealError):
    """An inbound frame could not be parsed; no request id can be recovered."""


class RequestIdExhaustedError(SurrealError):
    """Every request id below the ceiling is still waiting for a response."""


__all__ = [
    "BatchError",
    "MalformedFrameError",
    "ProtocolError",
    "RequestIdExhaustedError",
    "RequestTimeoutError",
    "SurrealError",
    "TransportError",
]
