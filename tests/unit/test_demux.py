from __future__ import annotations

import logging

import pytest

from surreal_rpc.errors import ProtocolError, MalformedFrameError
from surreal_rpc.rpc.demux import InboundDemultiplexer
from surreal_rpc.rpc.correlator import RequestCorrelator


@pytest.mark.asyncio
async def test_frames_resolve_their_own_pending_entry() -> None:
    correlator = RequestCorrelator()
    demux = InboundDemultiplexer(correlator)
    first = correlator.register(0, "select", "{}")
    second = correlator.register(1, "select", "{}")

    demux.handle_frame('{"id":1,"result":"second"}')
    demux.handle_frame('{"id":0,"result":"first"}')

    assert await first == "first"
    assert await second == "second"
    assert len(correlator) == 0


@pytest.mark.asyncio
async def test_error_frame_rejects_pending_entry() -> None:
    correlator = RequestCorrelator()
    demux = InboundDemultiplexer(correlator)
    future = correlator.register(0, "select", '{"id":0,"method":"select"}')

    demux.handle_frame('{"id":0,"error":{"code":-32602,"message":"Invalid params"}}')

    with pytest.raises(ProtocolError, match="Invalid params"):
        await future


@pytest.mark.asyncio
async def test_orphan_frame_warns_and_keeps_other_entries(caplog: pytest.LogCaptureFixture) -> None:
    correlator = RequestCorrelator()
    demux = InboundDemultiplexer(correlator)
    future = correlator.register(0, "select", "{}")

    with caplog.at_level(logging.WARNING):
        demux.handle_frame('{"id":42,"result":"late"}')

    assert "No pending request for id 42" in caplog.text
    assert not future.done()

    demux.handle_frame('{"id":0,"result":"mine"}')
    assert await future == "mine"


@pytest.mark.asyncio
async def test_push_frame_without_id_is_dropped(caplog: pytest.LogCaptureFixture) -> None:
    correlator = RequestCorrelator()
    demux = InboundDemultiplexer(correlator)
    future = correlator.register(0, "select", "{}")

    with caplog.at_level(logging.WARNING):
        demux.handle_frame('{"result":{"action":"CREATE","id":"live-1"}}')

    assert "without a request id" in caplog.text
    assert not future.done()
    assert 0 in correlator


@pytest.mark.asyncio
async def test_malformed_frame_is_reported_without_touching_pending() -> None:
    correlator = RequestCorrelator()
    reported: list[MalformedFrameError] = []
    demux = InboundDemultiplexer(correlator, on_error=reported.append)
    future = correlator.register(0, "select", "{}")

    demux.handle_frame("{not json")

    assert len(reported) == 1
    assert "failed to parse JSON" in str(reported[0])
    assert not future.done()
    assert 0 in correlator
