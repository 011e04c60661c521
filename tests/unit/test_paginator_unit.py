"""Unit tests for list_tables pagination."""

from __future__ import annotations

import threading
from typing import Any, Dict

import pytest
from botocore.exceptions import ClientError

from easy_dynamodb.adapter import DynamodbAdapter

from tests.unit.mocks import StubClient


@pytest.fixture
def client() -> StubClient:
    stub = StubClient()
    stub.table_pages = [
        {"TableNames": ["a", "b"], "LastEvaluatedTableName": "t1"},
        {"TableNames": ["c"]},
    ]
    return stub


@pytest.fixture
def adapter(client: StubClient):
    with DynamodbAdapter(client=client) as dynamodb:
        yield dynamodb


def test_list_tables_appends_pages_in_service_order(adapter: DynamodbAdapter) -> None:
    assert adapter.list_tables().result(timeout=5) == ["a", "b", "c"]


def test_list_tables_threads_continuation_token(adapter: DynamodbAdapter, client: StubClient) -> None:
    adapter.list_tables().result(timeout=5)

    assert client.calls_to("list_tables") == [{}, {"ExclusiveStartTableName": "t1"}]


def test_list_tables_single_page(adapter: DynamodbAdapter, client: StubClient) -> None:
    client.table_pages = [{"TableNames": ["only"]}]

    assert adapter.list_tables().result(timeout=5) == ["only"]
    assert len(client.calls_to("list_tables")) == 1


@pytest.mark.parametrize("page", [0, 1])
def test_list_tables_failure_on_any_page_rejects(adapter: DynamodbAdapter, client: StubClient, page: int) -> None:
    client.fail_on_page = page

    with pytest.raises(ClientError):
        adapter.list_tables().result(timeout=5)


def test_list_tables_failure_reaches_callback_without_partial_names(
    adapter: DynamodbAdapter, client: StubClient
) -> None:
    client.fail_on_page = 1
    received: Dict[str, Any] = {}
    finished = threading.Event()

    def callback(error, data):
        received.update(error=error, data=data)
        finished.set()

    assert adapter.list_tables(callback) is None
    assert finished.wait(timeout=5)
    assert isinstance(received["error"], ClientError)
    assert received["data"] is None


def test_list_tables_callback_receives_all_names(adapter: DynamodbAdapter) -> None:
    received: Dict[str, Any] = {}
    finished = threading.Event()

    def callback(error, data):
        received.update(error=error, data=data)
        finished.set()

    assert adapter.list_tables(callback) is None
    assert finished.wait(timeout=5)
    assert received == {"error": None, "data": ["a", "b", "c"]}


def test_independent_listings_do_not_share_results(adapter: DynamodbAdapter, client: StubClient) -> None:
    first = adapter.list_tables().result(timeout=5)
    client.table_pages = [{"TableNames": ["x"]}]
    client.calls.clear()
    second = adapter.list_tables().result(timeout=5)

    assert first == ["a", "b", "c"]
    assert second == ["x"]


def test_list_tables_malformed_page_rejects(adapter: DynamodbAdapter, client: StubClient) -> None:
    client.table_pages = [{"TableNames": ["a"], "LastEvaluatedTableName": "a"}, None]

    with pytest.raises(AttributeError):
        adapter.list_tables().result(timeout=5)
