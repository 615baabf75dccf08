"""Unit tests for duration grouping transform."""

from __future__ import annotations

import pytest

from core.errors import TripvizEmptyDataError
from core.types import TripRecord
from transforms.duration_grouping import group_by_duration


def _record(index: int, duration: int) -> TripRecord:
    return TripRecord(
        index=index,
        trip_duration_days=duration,
        miles_traveled=10.0 * index,
        total_receipts_amount=5.0,
        expected_output=100.0 + index,
    )


def test_group_by_duration_counts_distinct_durations() -> None:
    """One group per distinct duration, sized by its member count."""
    records = [_record(0, 5), _record(1, 2), _record(2, 5), _record(3, 12), _record(4, 5)]

    groups = group_by_duration(records)

    assert {group.duration: group.point_count for group in groups} == {2: 1, 5: 3, 12: 1}


def test_group_by_duration_orders_numerically_ascending() -> None:
    """Groups should sort numerically, not lexically, regardless of input order."""
    records = [_record(0, 10), _record(1, 9), _record(2, 1), _record(3, 2)]

    groups = group_by_duration(records)

    assert [group.duration for group in groups] == [1, 2, 9, 10]


def test_group_by_duration_keeps_source_order_within_group() -> None:
    """Members of a group should stay in input order."""
    records = [_record(4, 3), _record(1, 3), _record(7, 3)]

    (group,) = group_by_duration(records)

    assert [record.index for record in group.records] == [4, 1, 7]


def test_group_by_duration_raises_for_no_records() -> None:
    """Zero records should take the no valid data path."""
    with pytest.raises(TripvizEmptyDataError, match="No valid data groups"):
        group_by_duration([])
