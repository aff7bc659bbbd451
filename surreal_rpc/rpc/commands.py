"""Parameter lists for the RPC methods that need more than positional values."""

from __future__ import annotations

from typing import Any


def signup_params(*, ns: str, db: str, sc: str, username: str, password: str) -> list[Any]:
    return [{"NS": ns, "DB": db, "SC": sc, "username": username, "password": password}]


def signin_params(
    *,
    user: str,
    password: str,
    ns: str | None = None,
    db: str | None = None,
    sc: str | None = None,
) -> list[Any]:
    # Root signin carries only the credentials; scope keys are added when given.
    credentials: dict[str, Any] = {"user": user, "pass": password}
    if ns:
        credentials["NS"] = ns
    if db:
        credentials["DB"] = db
    if sc:
        credentials["SC"] = sc
    return [credentials]


def record_params(thing: str, data: Any = None) -> list[Any]:
    if data is None:
        return [thing]
    return [thing, data]


def query_params(sql: str, bindings: dict[str, Any] | None = None) -> list[Any]:
    if bindings is None:
        return [sql]
    return [sql, bindings]


__all__ = ["query_params", "record_params", "signin_params", "signup_params"]
