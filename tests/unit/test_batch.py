from __future__ import annotations

import pytest

from tests.utils import statement
from surreal_rpc.errors import BatchError, ProtocolError
from surreal_rpc.rpc.batch import normalize_query_result


def test_single_statement_returns_single_result() -> None:
    results = normalize_query_result([statement([{"1": 1}])], request='["SELECT 1"]')
    assert results == [[{"1": 1}]]


def test_statements_without_result_keep_their_slot() -> None:
    response = [statement([1]), {"status": "OK", "time": "1µs"}, statement("x")]
    assert normalize_query_result(response, request="[]") == [[1], None, "x"]


def test_any_failed_statement_fails_the_batch() -> None:
    response = [
        statement([{"1": 1}]),
        statement("Can not execute statement: bogus", status="ERR"),
    ]
    request = '["SELECT 1; SELECT bogus;"]'

    with pytest.raises(BatchError) as exc:
        normalize_query_result(response, request=request)

    assert "Can not execute statement: bogus" in exc.value.message
    assert exc.value.detail["request"] == request


def test_failed_statement_messages_are_joined_in_order() -> None:
    response = [
        statement("first failure", status="ERR"),
        statement(None),
        statement("second failure", status="ERR"),
    ]

    with pytest.raises(BatchError) as exc:
        normalize_query_result(response, request="[]")

    assert exc.value.message == "first failure;second failure"
    assert exc.value.detail["errors"] == ["first failure", "second failure"]


def test_non_list_response_is_a_protocol_error() -> None:
    with pytest.raises(ProtocolError):
        normalize_query_result({"status": "OK"}, request="[]")


def test_non_object_statement_outcome_is_a_protocol_error() -> None:
    request = '["SELECT 1; SELECT 2;"]'

    with pytest.raises(ProtocolError) as exc:
        normalize_query_result([statement([1]), "garbage"], request=request)

    assert exc.value.detail["request"] == request
