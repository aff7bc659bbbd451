"""Normalization of batched multi-statement query results."""

from __future__ import annotations

from typing import Any

from surreal_rpc.errors import BatchError, ProtocolError
from surreal_rpc.config.rpc import (
    QUERY_KEY_STATUS,
    QUERY_KEY_RESULT,
    QUERY_STATUS_ERR,
    RPC_ERROR_KEY_ERRORS,
    RPC_ERROR_KEY_REQUEST,
    QUERY_ERROR_SEPARATOR,
)


def normalize_query_result(response: Any, *, request: str) -> list[Any]:
    """Unwrap per-statement outcomes into per-statement results.

    Any ``ERR`` outcome fails the whole batch, even when other statements
    succeeded. Statements without a result keep their slot as ``None`` so the
    output lines up with the input statements.
    """
    if not isinstance(response, list):
        raise ProtocolError(
            "query response must be a list of statement outcomes",
            {RPC_ERROR_KEY_REQUEST: request, QUERY_KEY_RESULT: response},
        )

    errors: list[str] = []
    results: list[Any] = []
    for outcome in response:
        if not isinstance(outcome, dict):
            raise ProtocolError(
                "query statement outcome must be an object",
                {RPC_ERROR_KEY_REQUEST: request, QUERY_KEY_RESULT: response},
            )
        if outcome.get(QUERY_KEY_STATUS) == QUERY_STATUS_ERR:
            errors.append(str(outcome.get(QUERY_KEY_RESULT)))
            results.append(None)
            continue
        results.append(outcome.get(QUERY_KEY_RESULT))

    if errors:
        raise BatchError(
            QUERY_ERROR_SEPARATOR.join(errors),
            {RPC_ERROR_KEY_REQUEST: request, RPC_ERROR_KEY_ERRORS: errors},
        )
    return results


__all__ = ["normalize_query_result"]
