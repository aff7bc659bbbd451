"""Connection handle lifecycle states."""

from __future__ import annotations

import enum


class TransportState(enum.Enum):
    ABSENT = "absent"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


__all__ = ["TransportState"]
