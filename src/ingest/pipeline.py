"""Visualization orchestration for trip case datasets.

This module coordinates source fetch, record validation, duration
grouping, trace construction, and rendering for one stateless run.
Each step raises its own typed error; ``visualize_cases`` is the
boundary that maps them onto user-visible messages.
"""

from __future__ import annotations

import httpx

from core.config import TripvizConfig
from core.errors import TripvizEmptyDataError, TripvizError, TripvizFormatError
from core.logging_config import get_logger
from core.types import (
    CaseLoadResult,
    VisualizationOptions,
    VisualizationOutcome,
    VisualizationResult,
)
from ingest.record_validation import parse_case_records
from ingest.source_reader import fetch_source_payload
from render.figure_output import render_traces, write_error_output
from transforms.duration_grouping import group_by_duration
from transforms.trace_builder import build_plot_traces

_LOGGER = get_logger(__name__)


async def load_duration_groups(
    source_uri: str,
    config: TripvizConfig,
    http_client: httpx.AsyncClient | None = None,
) -> CaseLoadResult:
    """Fetch, validate, and group cases from a source.

    Args:
        source_uri: Local JSON path or http(s) URL.
        config: Runtime configuration.
        http_client: Optional HTTP client to reuse.

    Returns:
        Ordered duration groups with skip diagnostics.

    Raises:
        TripvizFetchError: If the source cannot be retrieved.
        TripvizFormatError: If the payload is not a JSON list.
        TripvizEmptyDataError: If no record is valid.
    """
    payload = await fetch_source_payload(source_uri, config, http_client)
    validation = parse_case_records(payload)
    groups = group_by_duration(validation.records)
    return CaseLoadResult(
        source_uri=source_uri,
        groups=tuple(groups),
        skipped_indexes=validation.skipped_indexes,
        input_count=len(payload),
    )


async def render_visualization(
    options: VisualizationOptions,
    config: TripvizConfig,
    http_client: httpx.AsyncClient | None = None,
) -> VisualizationResult:
    """Run the full pipeline and write the chart.

    Args:
        options: Source and output selection.
        config: Runtime configuration.
        http_client: Optional HTTP client to reuse.

    Returns:
        Written chart summary.

    Raises:
        TripvizError: For any failed pipeline step.
    """
    load_result = await load_duration_groups(options.source_uri, config, http_client)
    traces = build_plot_traces(load_result.groups)
    output_path = render_traces(traces, options.output_path)
    result = VisualizationResult(
        output_path=output_path,
        group_count=len(traces),
        point_count=load_result.point_count,
        skipped_count=len(load_result.skipped_indexes),
    )
    _LOGGER.info(
        "visualization_rendered",
        source_uri=options.source_uri,
        output_path=str(output_path),
        group_count=result.group_count,
        point_count=result.point_count,
        skipped_count=result.skipped_count,
    )
    return result


async def visualize_cases(
    options: VisualizationOptions,
    config: TripvizConfig,
    http_client: httpx.AsyncClient | None = None,
) -> VisualizationOutcome:
    """Render the chart or report a user-visible failure; never raises.

    Args:
        options: Source and output selection.
        config: Runtime configuration.
        http_client: Optional HTTP client to reuse.

    Returns:
        Outcome with the message shown to the user.
    """
    try:
        result = await render_visualization(options, config, http_client)
    except Exception as error:
        return _report_failure(options, error)
    return VisualizationOutcome(
        succeeded=True,
        message=f"Rendered {result.point_count} cases in {result.group_count} duration groups.",
        output_path=result.output_path,
        result=result,
    )


def failure_message(error: Exception) -> str:
    """Map a pipeline error onto its user-visible message.

    Args:
        error: Error raised by a pipeline step.

    Returns:
        Plain-text message for the display region.
    """
    if isinstance(error, (TripvizFormatError, TripvizEmptyDataError)):
        return f"Error: {error}"
    return f"Failed to load visualization: {error}. Check the log output for more details."


def _report_failure(options: VisualizationOptions, error: Exception) -> VisualizationOutcome:
    """Log the failure and write its message into the display region."""
    message = failure_message(error)
    _LOGGER.error(
        "visualization_failed",
        source_uri=options.source_uri,
        error_type=type(error).__name__,
        error=str(error),
        expected=isinstance(error, TripvizError),
    )
    try:
        written_path = write_error_output(options.output_path, message)
    except TripvizError as write_error:
        _LOGGER.error(
            "error_output_failed",
            output_path=str(options.output_path),
            error=str(write_error),
        )
        written_path = None
    return VisualizationOutcome(succeeded=False, message=message, output_path=written_path)
