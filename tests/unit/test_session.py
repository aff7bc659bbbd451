from __future__ import annotations

import asyncio

import pytest

from tests.utils import FakeTransportFactory
from surreal_rpc.state import TransportState
from surreal_rpc.errors import TransportError
from surreal_rpc.rpc.session import SessionManager


def _manager(factory: FakeTransportFactory, **kwargs) -> SessionManager:
    return SessionManager(
        lambda: factory("ws://db/rpc", on_message=lambda raw: None, on_close=lambda reason: None),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_ensure_ready_opens_once_and_reuses_connection() -> None:
    factory = FakeTransportFactory()
    session = _manager(factory)
    assert session.state is TransportState.ABSENT

    first = await session.ensure_ready()
    second = await session.ensure_ready()

    assert first is second
    assert len(factory.created) == 1
    assert session.state is TransportState.OPEN


@pytest.mark.asyncio
async def test_concurrent_first_calls_share_one_connection_attempt() -> None:
    factory = FakeTransportFactory()
    session = _manager(factory)

    transports = await asyncio.gather(*(session.ensure_ready() for _ in range(10)))

    assert len(factory.created) == 1
    assert all(t is transports[0] for t in transports)
    assert session.connect_count == 1


@pytest.mark.asyncio
async def test_open_failure_raises_and_leaves_state_absent() -> None:
    factory = FakeTransportFactory(open_errors=[ConnectionRefusedError("refused")])
    session = _manager(factory)

    with pytest.raises(TransportError, match="refused"):
        await session.ensure_ready()

    assert session.state is TransportState.ABSENT
    assert session.transport is None

    # Not retried automatically, but the next call tries again.
    await session.ensure_ready()
    assert len(factory.created) == 2
    assert session.state is TransportState.OPEN


@pytest.mark.asyncio
async def test_connection_loss_reconnects_on_next_call() -> None:
    factory = FakeTransportFactory()
    session = _manager(factory)
    first = await session.ensure_ready()

    first.drop()
    assert session.state is TransportState.CLOSED

    second = await session.ensure_ready()
    assert second is not first
    assert session.state is TransportState.OPEN
    assert session.connect_count == 2


@pytest.mark.asyncio
async def test_on_open_hook_runs_before_callers_are_released() -> None:
    factory = FakeTransportFactory()
    events: list[str] = []

    async def on_open(transport) -> None:
        events.append("scope:start")
        await asyncio.sleep(0)
        events.append("scope:done")

    session = _manager(factory, on_open=on_open)

    async def caller(name: str) -> None:
        await session.ensure_ready()
        events.append(name)

    await asyncio.gather(caller("a"), caller("b"))

    assert events[:2] == ["scope:start", "scope:done"]
    assert sorted(events[2:]) == ["a", "b"]


@pytest.mark.asyncio
async def test_on_open_failure_closes_fresh_transport() -> None:
    factory = FakeTransportFactory()

    async def on_open(transport) -> None:
        raise TransportError("use failed")

    session = _manager(factory, on_open=on_open)

    with pytest.raises(TransportError, match="use failed"):
        await session.ensure_ready()

    assert factory.last.state is TransportState.CLOSED
    assert session.state is TransportState.ABSENT


@pytest.mark.asyncio
async def test_close_is_idempotent_and_safe_without_connection() -> None:
    factory = FakeTransportFactory()
    session = _manager(factory)

    await session.close()
    await session.ensure_ready()
    await session.close()
    await session.close()

    assert session.state is TransportState.CLOSED


@pytest.mark.asyncio
async def test_state_reports_connecting_while_open_is_in_flight() -> None:
    factory = FakeTransportFactory()
    session = _manager(factory)

    task = asyncio.create_task(session.ensure_ready())
    await asyncio.sleep(0)

    assert session.state is TransportState.CONNECTING
    await task
    assert session.state is TransportState.OPEN
