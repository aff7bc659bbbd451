"""RPC envelope vocabulary and protocol constants."""

from __future__ import annotations

# Envelope keys
RPC_KEY_ID = "id"
RPC_KEY_METHOD = "method"
RPC_KEY_PARAMS = "params"
RPC_KEY_RESULT = "result"
RPC_KEY_ERROR = "error"

# Keys inside an error detail
RPC_ERROR_KEY_MESSAGE = "message"
RPC_ERROR_KEY_REQUEST = "request"
RPC_ERROR_KEY_ERRORS = "errors"

# Request ids cycle through [0, REQUEST_ID_CEILING).
REQUEST_ID_CEILING = 1000

# Per-statement outcome of a batched query
QUERY_KEY_STATUS = "status"
QUERY_KEY_RESULT = "result"
QUERY_STATUS_OK = "OK"
QUERY_STATUS_ERR = "ERR"
QUERY_ERROR_SEPARATOR = ";"

# Method names
METHOD_USE = "use"
METHOD_INFO = "info"
METHOD_SIGNUP = "signup"
METHOD_SIGNIN = "signin"
METHOD_AUTHENTICATE = "authenticate"
METHOD_INVALIDATE = "invalidate"
METHOD_SELECT = "select"
METHOD_CREATE = "create"
METHOD_UPDATE = "update"
METHOD_MERGE = "merge"
METHOD_PATCH = "patch"
METHOD_DELETE = "delete"
METHOD_QUERY = "query"

__all__ = [
    "RPC_KEY_ID",
    "RPC_KEY_METHOD",
    "RPC_KEY_PARAMS",
    "RPC_KEY_RESULT",
    "RPC_KEY_ERROR",
    "RPC_ERROR_KEY_MESSAGE",
    "RPC_ERROR_KEY_REQUEST",
    "RPC_ERROR_KEY_ERRORS",
    "REQUEST_ID_CEILING",
    "QUERY_KEY_STATUS",
    "QUERY_KEY_RESULT",
    "QUERY_STATUS_OK",
    "QUERY_STATUS_ERR",
    "QUERY_ERROR_SEPARATOR",
    "METHOD_USE",
    "METHOD_INFO",
    "METHOD_SIGNUP",
    "METHOD_SIGNIN",
    "METHOD_AUTHENTICATE",
    "METHOD_INVALIDATE",
    "METHOD_SELECT",
    "METHOD_CREATE",
    "METHOD_UPDATE",
    "METHOD_MERGE",
    "METHOD_PATCH",
    "METHOD_DELETE",
    "METHOD_QUERY",
]
