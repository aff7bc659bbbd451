"""Bookkeeping record for one outstanding request."""

from __future__ import annotations

import asyncio
from typing import Any
from dataclasses import dataclass


@dataclass(slots=True)
class PendingRequest:
    request_id: int
    method: str
    # Serialized envelope as sent; attached to server errors for context.
    envelope: str
    future: asyncio.Future[Any]
    # Transport the envelope went out on; a closing transport fails only its own entries.
    transport: Any = None


__all__ = ["PendingRequest"]
