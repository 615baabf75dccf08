"""Case record validation.

This module checks the top-level payload shape and converts each
well-formed item into a typed record. Malformed items are skipped
with a diagnostic and never abort the run.
"""

from __future__ import annotations

import math
from typing import Any, cast

from core.constants import (
    DURATION_FIELD_NAME,
    FORMAT_ERROR_MESSAGE,
    INPUT_FIELD_NAME,
    MILES_FIELD_NAME,
    OUTPUT_FIELD_NAME,
    RECEIPTS_FIELD_NAME,
    REQUIRED_INPUT_FIELDS,
)
from core.errors import TripvizFormatError
from core.logging_config import get_logger
from core.types import RecordValidationResult, TripRecord

_LOGGER = get_logger(__name__)


def parse_case_records(payload: Any) -> RecordValidationResult:
    """Validate a decoded JSON payload into trip records.

    Args:
        payload: Decoded JSON value.

    Returns:
        Accepted records plus the positions of skipped items.

    Raises:
        TripvizFormatError: If payload is not a JSON list.
    """
    if not isinstance(payload, list):
        raise TripvizFormatError(FORMAT_ERROR_MESSAGE)
    records: list[TripRecord] = []
    skipped_indexes: list[int] = []
    for index, item in enumerate(payload):
        reason = record_rejection_reason(item)
        if reason is not None:
            _LOGGER.warning("record_skipped", index=index, reason=reason)
            skipped_indexes.append(index)
            continue
        records.append(_build_record(index, item))
    _LOGGER.info(
        "records_validated",
        input_count=len(payload),
        accepted_count=len(records),
        skipped_count=len(skipped_indexes),
    )
    return RecordValidationResult(records=tuple(records), skipped_indexes=tuple(skipped_indexes))


def record_rejection_reason(item: Any) -> str | None:
    """Explain why an item is not a valid case record.

    Args:
        item: One element of the source array.

    Returns:
        Human-readable reason, or None when the item is valid.
    """
    if not isinstance(item, dict):
        return "item is not an object"
    case_input = item.get(INPUT_FIELD_NAME)
    if not isinstance(case_input, dict):
        return f"missing or invalid '{INPUT_FIELD_NAME}' object"
    for field_name in REQUIRED_INPUT_FIELDS:
        if field_name not in case_input:
            return f"missing '{INPUT_FIELD_NAME}.{field_name}'"
    if OUTPUT_FIELD_NAME not in item:
        return f"missing '{OUTPUT_FIELD_NAME}'"
    if _as_duration(case_input[DURATION_FIELD_NAME]) is None:
        return f"'{INPUT_FIELD_NAME}.{DURATION_FIELD_NAME}' is not an integer"
    for field_name in (MILES_FIELD_NAME, RECEIPTS_FIELD_NAME):
        if not _is_number(case_input[field_name]):
            return f"'{INPUT_FIELD_NAME}.{field_name}' is not a finite number"
    if not _is_number(item[OUTPUT_FIELD_NAME]):
        return f"'{OUTPUT_FIELD_NAME}' is not a finite number"
    return None


def _build_record(index: int, item: dict[str, Any]) -> TripRecord:
    case_input = item[INPUT_FIELD_NAME]
    return TripRecord(
        index=index,
        trip_duration_days=cast(int, _as_duration(case_input[DURATION_FIELD_NAME])),
        miles_traveled=case_input[MILES_FIELD_NAME],
        total_receipts_amount=case_input[RECEIPTS_FIELD_NAME],
        expected_output=item[OUTPUT_FIELD_NAME],
    )


def _is_number(value: Any) -> bool:
    """Return whether value is a finite JSON number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _as_duration(value: Any) -> int | None:
    """Normalize an integral JSON number to int.

    Args:
        value: Raw duration field value.

    Returns:
        Integer duration, or None for non-integral values.
    """
    if not _is_number(value):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    return int(value)
