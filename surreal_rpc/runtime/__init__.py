"""Runtime package: environment-driven settings and logging setup."""

from .logging import configure_logging
from .settings import load_settings, load_websocket_settings

__all__ = ["configure_logging", "load_settings", "load_websocket_settings"]
