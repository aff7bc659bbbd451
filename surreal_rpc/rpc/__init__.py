"""Connection/session core: transport, correlation, dispatch and demultiplexing."""

from .session import SessionManager
from .dispatcher import Dispatcher
from .transport import WebSocketTransport
from .demux import InboundDemultiplexer
from .correlator import RequestCorrelator
from .batch import normalize_query_result

__all__ = [
    "Dispatcher",
    "InboundDemultiplexer",
    "RequestCorrelator",
    "SessionManager",
    "WebSocketTransport",
    "normalize_query_result",
]
