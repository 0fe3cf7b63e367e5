"""Tests for activity context lookup and timestamp ordering."""

from __future__ import annotations

from datetime import timezone

import pytest  # type: ignore

from recruitdesk.errors import TableNotFound
from recruitdesk.resolve.activities import activities_for_context, parse_timestamp
from recruitdesk.store.memory_store import MemoryTableStore


def _ids(activities) -> list:
    return [a.activity_id for a in activities]


def test_union_of_candidate_and_job(store: MemoryTableStore) -> None:
    activities = activities_for_context(store, "C1", "JOB0001")
    # A4 matches by job only; A1, A3, A5 by candidate. A5 has no parseable date.
    assert _ids(activities) == ["A4", "A3", "A1", "A5"]


def test_job_only_matches_any_candidate(store: MemoryTableStore) -> None:
    assert _ids(activities_for_context(store, job_id="J1")) == ["A4", "A1"]


def test_candidate_only(store: MemoryTableStore) -> None:
    assert _ids(activities_for_context(store, candidate_id="C2")) == ["A6", "A2"]


def test_ties_keep_table_order(store: MemoryTableStore) -> None:
    # A2 and A4 share a timestamp; A2 comes first in the table.
    assert _ids(activities_for_context(store, "C3", "JOB0007")) == ["A2", "A4"]


def test_no_context_returns_empty(store: MemoryTableStore) -> None:
    assert activities_for_context(store) == []
    assert activities_for_context(store, "", "") == []


def test_missing_activities_table_raises(store: MemoryTableStore) -> None:
    del store.tables["Activities"]
    with pytest.raises(TableNotFound):
        activities_for_context(store, "C1")


def test_aliases_are_read(store: MemoryTableStore) -> None:
    first = activities_for_context(store, "C1")[0]
    assert first.type == "Note"
    assert first.notes == "Prefers remote"


@pytest.mark.parametrize(
    "value",
    ["2024-01-03T09:00:00", "2024-01-03T09:00:00Z", "2024-01-03 09:00:00", "01/03/2024 09:00"],
)
def test_parse_timestamp_formats(value: str) -> None:
    parsed = parse_timestamp(value)
    assert parsed is not None
    assert (parsed.year, parsed.month, parsed.day, parsed.hour) == (2024, 1, 3, 9)
    assert parsed.tzinfo is not None


def test_parse_timestamp_keeps_offset() -> None:
    parsed = parse_timestamp("2024-01-03T10:00:00+01:00")
    assert parsed is not None
    assert parsed.astimezone(timezone.utc).hour == 9


@pytest.mark.parametrize("value", ["", "   ", "yesterday", None])
def test_parse_timestamp_unparseable(value) -> None:
    assert parse_timestamp(value) is None
