"""Request serialization and response parsing for the RPC envelope."""

from __future__ import annotations

from typing import Any
from collections.abc import Sequence

import orjson

from surreal_rpc.errors import SurrealError, MalformedFrameError
from surreal_rpc.config.rpc import RPC_KEY_ID, RPC_KEY_METHOD, RPC_KEY_PARAMS

Params = Sequence[Any] | str | None


def build_request(request_id: int, method: str, params: Params = None) -> str:
    """Serialize ``{"id", "method", "params"?}``.

    A ``str`` *params* is treated as already-serialized JSON and embedded
    verbatim; an empty string or ``None`` omits the key.
    """
    envelope: dict[str, Any] = {RPC_KEY_ID: request_id, RPC_KEY_METHOD: method}
    if isinstance(params, str):
        if params:
            envelope[RPC_KEY_PARAMS] = orjson.Fragment(params)
    elif params is not None:
        envelope[RPC_KEY_PARAMS] = list(params)
    try:
        return orjson.dumps(envelope).decode("utf-8")
    except orjson.JSONEncodeError as exc:
        raise SurrealError(f"failed to serialize {method!r} request: {exc}", {RPC_KEY_METHOD: method}) from exc


def encode_params(params: Sequence[Any]) -> str:
    return orjson.dumps(list(params)).decode("utf-8")


def parse_response(raw: str | bytes) -> dict[str, Any]:
    try:
        frame = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise MalformedFrameError(f"failed to parse JSON from server: {raw!r}", exc) from exc

    if not isinstance(frame, dict):
        raise MalformedFrameError(f"response frame must be a JSON object: {raw!r}", frame)
    return frame


def frame_id(frame: dict[str, Any]) -> int | None:
    request_id = frame.get(RPC_KEY_ID)
    # bool is an int subclass; a true/false id is never one we issued.
    if isinstance(request_id, bool) or not isinstance(request_id, int):
        return None
    return request_id


__all__ = ["Params", "build_request", "encode_params", "frame_id", "parse_response"]
