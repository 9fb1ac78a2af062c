"""Tests for search history."""
import json

import pytest

from wordmate.services.search_history_service import SearchHistory
from wordmate.services.storage_service import RecordStore


@pytest.fixture
def history(records: RecordStore) -> SearchHistory:
    history = SearchHistory(records, size=10)
    history.load()
    return history


def test_repeat_query_keeps_position(history: SearchHistory) -> None:
    """Test a repeated search does not move to the front."""
    history.record("apple")
    history.record("banana")
    history.record("apple")

    assert history.entries == ["banana", "apple"]


def test_queries_are_normalized(history: SearchHistory, store) -> None:
    history.record("  Apple ")
    history.record("APPLE")

    assert history.entries == ["apple"]
    assert json.loads(store.get("searchHistory")) == ["apple"]


def test_blank_query_is_ignored(history: SearchHistory, store) -> None:
    history.record("   ")
    assert history.entries == []
    assert store.get("searchHistory") is None


def test_history_keeps_ten_most_recent(history: SearchHistory) -> None:
    for i in range(12):
        history.record(f"word{i}")

    assert history.entries == [f"word{i}" for i in range(11, 1, -1)]


def test_history_reloads(history: SearchHistory, records: RecordStore) -> None:
    history.record("apple")
    history.record("banana")

    assert SearchHistory(records).load() == ["banana", "apple"]


def test_failed_write_keeps_previous_history(history: SearchHistory, store) -> None:
    history.record("apple")
    store.fail_writes = True

    assert history.record("banana") == ["apple"]
    assert history.entries == ["apple"]
