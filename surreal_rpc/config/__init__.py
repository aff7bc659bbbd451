"""Configuration module exports (env names, defaults and protocol constants)."""

from .rpc import REQUEST_ID_CEILING
from .websocket import DEFAULT_SURREAL_URL

__all__ = [
    "DEFAULT_SURREAL_URL",
    "REQUEST_ID_CEILING",
]
