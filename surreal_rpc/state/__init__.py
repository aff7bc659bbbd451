from .pending import PendingRequest
from .connection import TransportState
from .settings import ClientSettings, WebSocketSettings

__all__ = ["ClientSettings", "PendingRequest", "TransportState", "WebSocketSettings"]
