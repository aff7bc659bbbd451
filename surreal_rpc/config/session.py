"""Session scoping configuration (env names only)."""

from __future__ import annotations

ENV_SURREAL_NAMESPACE = "SURREAL_NS"
ENV_SURREAL_DATABASE = "SURREAL_DB"

# Emit connect/reconnect diagnostics at INFO instead of DEBUG.
ENV_SURREAL_LOG = "SURREAL_LOG"
DEFAULT_SURREAL_LOG = False

__all__ = [
    "ENV_SURREAL_NAMESPACE",
    "ENV_SURREAL_DATABASE",
    "ENV_SURREAL_LOG",
    "DEFAULT_SURREAL_LOG",
]
