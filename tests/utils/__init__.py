"""Test helpers.

Focused modules:
- transport.py: in-memory transport double with scripted responses
- server.py: in-process WebSocket RPC server for end-to-end tests
"""

from __future__ import annotations

from .server import RpcTestServer, unused_port
from .transport import FakeTransport, FakeTransportFactory, ok, err, statement

__all__ = [
    "FakeTransport",
    "FakeTransportFactory",
    "RpcTestServer",
    "err",
    "ok",
    "statement",
    "unused_port",
]
