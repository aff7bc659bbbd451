"""Public asyncio client for the SurrealDB WebSocket RPC endpoint."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable

from surreal_rpc.errors import TransportError
from surreal_rpc.config.websocket import DEFAULT_SURREAL_URL
from surreal_rpc.runtime.settings import load_settings, load_websocket_settings
from surreal_rpc.state import ClientSettings, TransportState
from surreal_rpc.config.rpc import (
    METHOD_USE,
    METHOD_INFO,
    METHOD_MERGE,
    METHOD_PATCH,
    METHOD_QUERY,
    METHOD_CREATE,
    METHOD_DELETE,
    METHOD_SELECT,
    METHOD_SIGNIN,
    METHOD_SIGNUP,
    METHOD_UPDATE,
    METHOD_INVALIDATE,
    METHOD_AUTHENTICATE,
)
from surreal_rpc.rpc import commands
from surreal_rpc.rpc.envelope import Params, encode_params
from surreal_rpc.rpc.batch import normalize_query_result
from surreal_rpc.rpc.session import SessionManager
from surreal_rpc.rpc.dispatcher import Dispatcher
from surreal_rpc.rpc.correlator import RequestCorrelator
from surreal_rpc.rpc.transport import FrameHandler, WebSocketTransport
from surreal_rpc.rpc.demux import FrameErrorHandler, InboundDemultiplexer

logger = logging.getLogger(__name__)

TransportFactory = Callable[..., Any]


class Surreal:
    """One logical connection to a SurrealDB server.

    Providing both *namespace* and *database* makes every (re)connection
    issue ``use`` before any other request::

        async with Surreal("ws://127.0.0.1:8000/rpc", namespace="test", database="test") as db:
            await db.create("app", {"my": 412})
            print(await db.select("app"))

    *transport_factory* is called as ``factory(url, on_message=..., on_close=...)``
    and defaults to :class:`WebSocketTransport`.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        namespace: str | None = None,
        database: str | None = None,
        log: bool = False,
        settings: ClientSettings | None = None,
        transport_factory: TransportFactory | None = None,
        on_frame_error: FrameErrorHandler | None = None,
    ) -> None:
        if settings is None:
            settings = ClientSettings(
                url=url or DEFAULT_SURREAL_URL,
                namespace=namespace,
                database=database,
                log=log,
                websocket=load_websocket_settings(),
            )
        self._settings = settings
        self._log_level = logging.INFO if settings.log else logging.DEBUG
        self._transport_factory = transport_factory

        self._correlator = RequestCorrelator()
        self._demux = InboundDemultiplexer(self._correlator, on_error=on_frame_error)
        self._session = SessionManager(
            self._new_transport,
            on_open=self._scope_session if settings.scoped else None,
            log=settings.log,
        )
        self._dispatcher = Dispatcher(
            self._session,
            self._correlator,
            request_timeout_s=settings.websocket.request_timeout_s,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> Surreal:
        return cls(settings=load_settings(), **kwargs)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def state(self) -> TransportState:
        return self._session.state

    @property
    def pending_count(self) -> int:
        return len(self._correlator)

    async def __aenter__(self) -> Surreal:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _new_transport(self) -> Any:
        transport: Any = None

        def on_close(reason: str) -> None:
            self._on_connection_lost(transport, reason)

        on_message: FrameHandler = self._demux.handle_frame
        if self._transport_factory is not None:
            transport = self._transport_factory(self._settings.url, on_message=on_message, on_close=on_close)
        else:
            transport = WebSocketTransport(
                self._settings.url,
                on_message=on_message,
                on_close=on_close,
                settings=self._settings.websocket,
            )
        return transport

    def _on_connection_lost(self, transport: Any, reason: str) -> None:
        url = self._settings.url
        failed = self._correlator.fail_all(
            lambda: TransportError(f"connection to {url} closed: {reason}", {"reason": reason}),
            transport=transport,
        )
        if failed:
            logger.warning("[Surreal] connection to %s closed (%s); failed %d pending request(s)", url, reason, failed)
        else:
            logger.log(self._log_level, "[Surreal] connection to %s closed (%s)", url, reason)

    async def _scope_session(self, transport: Any) -> None:
        await self._dispatcher.call(transport, METHOD_USE, [self._settings.namespace, self._settings.database])

    async def send(self, method: str, params: Params = None) -> Any:
        """Send one RPC request and return the frame's ``result`` unchanged.

        *params* is either a sequence of JSON-serializable values or an
        already-serialized JSON array string.
        """
        return await self._dispatcher.send(method, params)

    async def close(self) -> None:
        await self._session.close()

    async def query(self, sql: str, bindings: dict[str, Any] | None = None) -> list[Any]:
        params = commands.query_params(sql, bindings)
        response = await self.send(METHOD_QUERY, params)
        return normalize_query_result(response, request=encode_params(params))

    async def use(self, ns: str, db: str) -> Any:
        return await self.send(METHOD_USE, [ns, db])

    async def info(self) -> Any:
        return await self.send(METHOD_INFO)

    async def signup(self, *, ns: str, db: str, sc: str, username: str, password: str) -> Any:
        return await self.send(
            METHOD_SIGNUP,
            commands.signup_params(ns=ns, db=db, sc=sc, username=username, password=password),
        )

    async def signin(
        self,
        *,
        user: str,
        password: str,
        ns: str | None = None,
        db: str | None = None,
        sc: str | None = None,
    ) -> Any:
        """Sign in; pass only *user* and *password* to sign in as root."""
        return await self.send(
            METHOD_SIGNIN,
            commands.signin_params(user=user, password=password, ns=ns, db=db, sc=sc),
        )

    async def authenticate(self, token: str) -> Any:
        return await self.send(METHOD_AUTHENTICATE, [token])

    async def invalidate(self) -> Any:
        return await self.send(METHOD_INVALIDATE)

    async def select(self, thing: str) -> Any:
        return await self.send(METHOD_SELECT, commands.record_params(thing))

    async def create(self, thing: str, data: Any = None) -> Any:
        return await self.send(METHOD_CREATE, commands.record_params(thing, data))

    async def update(self, thing: str, data: Any = None) -> Any:
        return await self.send(METHOD_UPDATE, commands.record_params(thing, data))

    async def merge(self, thing: str, data: Any) -> Any:
        return await self.send(METHOD_MERGE, commands.record_params(thing, data))

    async def patch(self, thing: str, data: Any) -> Any:
        return await self.send(METHOD_PATCH, commands.record_params(thing, data))

    async def delete(self, thing: str) -> Any:
        return await self.send(METHOD_DELETE, commands.record_params(thing))


__all__ = ["Surreal"]
