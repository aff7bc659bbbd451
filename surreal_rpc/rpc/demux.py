"""Inbound frame demultiplexing onto pending requests."""

from __future__ import annotations

import logging
from collections.abc import Callable

from surreal_rpc.errors import MalformedFrameError

from .correlator import RequestCorrelator
from .envelope import frame_id, parse_response

logger = logging.getLogger(__name__)

FrameErrorHandler = Callable[[MalformedFrameError], None]


class InboundDemultiplexer:
    def __init__(self, correlator: RequestCorrelator, *, on_error: FrameErrorHandler | None = None) -> None:
        self._correlator = correlator
        self._on_error = on_error

    def handle_frame(self, raw: str | bytes) -> None:
        try:
            frame = parse_response(raw)
        except MalformedFrameError as exc:
            logger.error("%s", exc)
            if self._on_error is not None:
                self._on_error(exc)
            return

        request_id = frame_id(frame)
        if request_id is None:
            # Push frames (live query notifications) carry no request id.
            logger.warning("Dropping frame without a request id: %.200s", raw)
            return

        self._correlator.complete(request_id, frame)


__all__ = ["FrameErrorHandler", "InboundDemultiplexer"]
