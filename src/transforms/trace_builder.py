"""Plot trace construction.

This module projects duration groups into renderer-facing traces:
parallel coordinate sequences plus one hover label per point.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from core.types import DurationGroup, PlotTrace, TripRecord

_LABEL_LINE_BREAK = "<br>"
_MAX_PLAIN_POINT = 21
_MIN_PLAIN_POINT = -6


def build_plot_traces(groups: Sequence[DurationGroup]) -> list[PlotTrace]:
    """Build one trace per group, preserving group order.

    Args:
        groups: Duration groups in display order.

    Returns:
        Traces aligned with ``groups``.
    """
    return [_build_trace(group) for group in groups]


def trace_name(duration: int) -> str:
    """Legend name for a duration group."""
    return f"Duration: {duration} day(s)"


def format_point_label(record: TripRecord) -> str:
    """Build the hover label for one record.

    Output and receipts use two decimals; miles keep their source precision.

    Args:
        record: Validated trip record.

    Returns:
        Multi-line label joined with ``<br>``.
    """
    return _LABEL_LINE_BREAK.join(
        (
            f"Index: {record.index}",
            f"Output: {record.expected_output:.2f}",
            f"Duration (Days): {record.trip_duration_days}",
            f"Miles Traveled: {format_plain_number(record.miles_traveled)}",
            f"Receipts Amount: {record.total_receipts_amount:.2f}",
        )
    )


def format_plain_number(value: float) -> str:
    """Render a number the way a browser prints it.

    Uses the shortest round-trip digits, drops a trailing ``.0``, and
    switches to exponent form (``1e-7``, ``1e+21``) only when the decimal
    exponent is below -6 or at least 21.

    Args:
        value: Finite int or float.

    Returns:
        Display text for the number.
    """
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(float(value)))).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(digit) for digit in digits)
    point = len(text) + exponent
    if len(text) <= point <= _MAX_PLAIN_POINT:
        return sign + text + "0" * (point - len(text))
    if 0 < point <= _MAX_PLAIN_POINT:
        return sign + text[:point] + "." + text[point:]
    if _MIN_PLAIN_POINT < point <= 0:
        return sign + "0." + "0" * -point + text
    mantissa = text if len(text) == 1 else text[0] + "." + text[1:]
    return f"{sign}{mantissa}e{point - 1:+d}"


def output_range(traces: Sequence[PlotTrace]) -> tuple[float, float]:
    """Return the (min, max) expected output across all traces.

    Args:
        traces: Non-empty trace list.

    Returns:
        Shared color range bounds.
    """
    outputs = [value for trace in traces for value in trace.outputs]
    return min(outputs), max(outputs)


def _build_trace(group: DurationGroup) -> PlotTrace:
    records = group.records
    return PlotTrace(
        name=trace_name(group.duration),
        duration=group.duration,
        miles=tuple(record.miles_traveled for record in records),
        receipts=tuple(record.total_receipts_amount for record in records),
        outputs=tuple(record.expected_output for record in records),
        labels=tuple(format_point_label(record) for record in records),
    )
