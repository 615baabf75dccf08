"""Duration grouping transform.

This module partitions validated records by exact trip duration
and orders the resulting groups for display.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import EMPTY_DATA_ERROR_MESSAGE
from core.errors import TripvizEmptyDataError
from core.types import DurationGroup, TripRecord


def group_by_duration(records: Iterable[TripRecord]) -> list[DurationGroup]:
    """Group records by trip duration in ascending duration order.

    Args:
        records: Validated records in source order.

    Returns:
        One group per distinct duration; members keep source order.

    Raises:
        TripvizEmptyDataError: If no records were provided.
    """
    records_by_duration: dict[int, list[TripRecord]] = {}
    for record in records:
        records_by_duration.setdefault(record.trip_duration_days, []).append(record)
    if not records_by_duration:
        raise TripvizEmptyDataError(EMPTY_DATA_ERROR_MESSAGE)
    return [
        DurationGroup(duration=duration, records=tuple(records_by_duration[duration]))
        for duration in sorted(records_by_duration)
    ]
