"""asyncio driver for the SurrealDB JSON RPC protocol over one WebSocket.

Many concurrent requests share a single connection; responses are matched
back to their callers by request id, and server errors surface as typed
exceptions from :mod:`surreal_rpc.errors`.
"""

from .client import Surreal
from .state import ClientSettings, TransportState, WebSocketSettings
from .errors import (
    BatchError,
    SurrealError,
    ProtocolError,
    TransportError,
    MalformedFrameError,
    RequestTimeoutError,
    RequestIdExhaustedError,
)

__all__ = [
    "BatchError",
    "ClientSettings",
    "MalformedFrameError",
    "ProtocolError",
    "RequestIdExhaustedError",
    "RequestTimeoutError",
    "Surreal",
    "SurrealError",
    "TransportError",
    "TransportState",
    "WebSocketSettings",
]
