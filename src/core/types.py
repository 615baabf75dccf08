"""Shared typed models.

This module defines immutable data models used by the ingest,
transform, and render layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TripRecord:
    """One validated reimbursement case.

    Attributes:
        index: Zero-based position in the source array.
        trip_duration_days: Trip length in days.
        miles_traveled: Miles traveled during the trip.
        total_receipts_amount: Sum of submitted receipts.
        expected_output: Expected reimbursement amount.
    """

    index: int
    trip_duration_days: int
    miles_traveled: float
    total_receipts_amount: float
    expected_output: float


@dataclass(frozen=True)
class RecordValidationResult:
    """Validated records and the positions that were dropped.

    Attributes:
        records: Accepted records in source order.
        skipped_indexes: Source positions of rejected records.
    """

    records: tuple[TripRecord, ...]
    skipped_indexes: tuple[int, ...]


@dataclass(frozen=True)
class DurationGroup:
    """Records sharing one trip duration.

    Attributes:
        duration: Shared trip duration in days.
        records: Member records in source order.
    """

    duration: int
    records: tuple[TripRecord, ...]

    @property
    def point_count(self) -> int:
        """Number of records in the group."""
        return len(self.records)


@dataclass(frozen=True)
class PlotTrace:
    """Renderer-facing projection of one duration group.

    Attributes:
        name: Legend display name.
        duration: Source group duration.
        miles: X coordinates.
        receipts: Y coordinates.
        outputs: Z coordinates, also used for marker color.
        labels: Hover text, one per point.
    """

    name: str
    duration: int
    miles: tuple[float, ...]
    receipts: tuple[float, ...]
    outputs: tuple[float, ...]
    labels: tuple[str, ...]


@dataclass(frozen=True)
class CaseLoadResult:
    """Grouped cases loaded from one source.

    Attributes:
        source_uri: Path or URL the cases were read from.
        groups: Duration groups in ascending duration order.
        skipped_indexes: Source positions of rejected records.
        input_count: Number of items in the source array.
    """

    source_uri: str
    groups: tuple[DurationGroup, ...]
    skipped_indexes: tuple[int, ...]
    input_count: int

    @property
    def point_count(self) -> int:
        """Number of plotted records across all groups."""
        return sum(group.point_count for group in self.groups)


@dataclass(frozen=True)
class VisualizationOptions:
    """Visualization run options.

    Attributes:
        source_uri: Local JSON path or http(s) URL.
        output_path: Chart output file; suffix selects the renderer.
    """

    source_uri: str
    output_path: Path


@dataclass(frozen=True)
class VisualizationResult:
    """Artifacts of a successful visualization run.

    Attributes:
        output_path: Written chart path.
        group_count: Number of rendered traces.
        point_count: Number of rendered points.
        skipped_count: Number of dropped source records.
    """

    output_path: Path
    group_count: int
    point_count: int
    skipped_count: int


@dataclass(frozen=True)
class VisualizationOutcome:
    """User-facing outcome of a visualization run.

    Attributes:
        succeeded: Whether the chart was rendered.
        message: Text shown to the user.
        output_path: Path holding the chart or the error text, if written.
        result: Run artifacts when successful.
    """

    succeeded: bool
    message: str
    output_path: Path | None
    result: VisualizationResult | None = None
