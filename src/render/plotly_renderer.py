"""Interactive 3D scatter rendering with Plotly.

This module maps plot traces onto ``Scatter3d`` series and writes a
standalone HTML page whose chart div is the display region.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import plotly.graph_objects as go

from core.constants import (
    COLOR_SCALE_NAME,
    LEGEND_TITLE,
    MARKER_SIZE,
    MILES_AXIS_TITLE,
    OUTPUT_AXIS_TITLE,
    PLOT_CONTAINER_ID,
    PLOT_MARGINS,
    PLOT_TITLE,
    RECEIPTS_AXIS_TITLE,
)
from core.errors import TripvizRenderError
from core.types import PlotTrace
from transforms.trace_builder import output_range


def build_figure(traces: Sequence[PlotTrace]) -> go.Figure:
    """Build the grouped 3D scatter figure.

    All traces share one color range and only the first one draws a
    color bar, so the figure carries a single scale legend.

    Args:
        traces: Ordered, non-empty trace list.

    Returns:
        Plotly figure with one ``Scatter3d`` per trace.

    Raises:
        TripvizRenderError: If no traces are provided.
    """
    if not traces:
        raise TripvizRenderError("Cannot build a figure without traces.")
    color_min, color_max = output_range(traces)
    figure = go.Figure(
        data=[
            _build_scatter(trace, color_min, color_max, show_scale=trace_index == 0)
            for trace_index, trace in enumerate(traces)
        ],
        layout=build_layout(),
    )
    return figure


def build_layout() -> dict[str, Any]:
    """Fixed layout: title, margins, axis titles, and legend title."""
    return {
        "title": {"text": PLOT_TITLE},
        "margin": dict(PLOT_MARGINS),
        "scene": {
            "xaxis": {"title": {"text": MILES_AXIS_TITLE}},
            "yaxis": {"title": {"text": RECEIPTS_AXIS_TITLE}},
            "zaxis": {"title": {"text": OUTPUT_AXIS_TITLE}},
        },
        "legend": {"title": {"text": LEGEND_TITLE}},
    }


def write_figure_html(figure: go.Figure, output_path: Path) -> Path:
    """Write a standalone HTML page for the figure.

    Args:
        figure: Figure to serialize.
        output_path: Destination ``.html`` path.

    Returns:
        Written output path.

    Raises:
        TripvizRenderError: If the page cannot be written.
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        figure.write_html(
            str(output_path),
            include_plotlyjs="cdn",
            full_html=True,
            div_id=PLOT_CONTAINER_ID,
        )
    except OSError as error:
        raise TripvizRenderError(f"Failed to write chart to {output_path}: {error}.") from error
    return output_path


def _build_scatter(
    trace: PlotTrace, color_min: float, color_max: float, show_scale: bool
) -> go.Scatter3d:
    return go.Scatter3d(
        x=list(trace.miles),
        y=list(trace.receipts),
        z=list(trace.outputs),
        name=trace.name,
        mode="markers",
        text=list(trace.labels),
        hoverinfo="text",
        marker={
            "size": MARKER_SIZE,
            "color": list(trace.outputs),
            "colorscale": COLOR_SCALE_NAME,
            "cmin": color_min,
            "cmax": color_max,
            "showscale": show_scale,
            "colorbar": {"title": {"text": OUTPUT_AXIS_TITLE}},
        },
    )
