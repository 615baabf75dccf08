"""Static 3D scatter rendering with matplotlib.

This module draws the same grouped figure as the Plotly renderer into
a PNG image for environments without a browser.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from core.constants import (
    COLOR_SCALE_NAME,
    LEGEND_TITLE,
    MARKER_SIZE,
    MILES_AXIS_TITLE,
    OUTPUT_AXIS_TITLE,
    PLOT_TITLE,
    RECEIPTS_AXIS_TITLE,
    STATIC_FIGURE_DPI,
    STATIC_FIGURE_SIZE,
)
from core.errors import TripvizDependencyError, TripvizRenderError
from core.types import PlotTrace
from transforms.trace_builder import output_range


def save_static_figure(traces: Sequence[PlotTrace], output_path: Path) -> Path:
    """Save the grouped scatter as a PNG image.

    Args:
        traces: Ordered, non-empty trace list.
        output_path: Destination ``.png`` path.

    Returns:
        Written image path.

    Raises:
        TripvizDependencyError: If matplotlib is missing.
        TripvizRenderError: If no traces are provided or the write fails.
    """
    if not traces:
        raise TripvizRenderError("Cannot build a figure without traces.")
    try:
        from matplotlib.colors import Normalize
        from matplotlib.figure import Figure
    except ImportError as error:
        raise TripvizDependencyError(
            "Static chart rendering requires matplotlib. "
            "Install matplotlib or write an .html output instead."
        ) from error
    color_min, color_max = output_range(traces)
    figure = Figure(figsize=STATIC_FIGURE_SIZE)
    axis = figure.add_subplot(projection="3d")
    norm = Normalize(vmin=color_min, vmax=color_max)
    last_series = None
    for trace in traces:
        last_series = _plot_trace(axis, trace, norm)
    _decorate_axis(axis)
    figure.colorbar(last_series, ax=axis, shrink=0.6, pad=0.1, label=OUTPUT_AXIS_TITLE)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        figure.savefig(output_path, dpi=STATIC_FIGURE_DPI)
    except OSError as error:
        raise TripvizRenderError(f"Failed to write chart to {output_path}: {error}.") from error
    return output_path


def _plot_trace(axis: Any, trace: PlotTrace, norm: Any) -> Any:
    """Draw one duration group colored by expected output."""
    return axis.scatter(
        trace.miles,
        trace.receipts,
        trace.outputs,
        c=trace.outputs,
        cmap=COLOR_SCALE_NAME.lower(),
        norm=norm,
        s=MARKER_SIZE**2,
        depthshade=False,
        label=trace.name,
    )


def _decorate_axis(axis: Any) -> None:
    axis.set_title(PLOT_TITLE)
    axis.set_xlabel(MILES_AXIS_TITLE)
    axis.set_ylabel(RECEIPTS_AXIS_TITLE)
    axis.set_zlabel(OUTPUT_AXIS_TITLE)
    axis.legend(title=LEGEND_TITLE, loc="upper left", fontsize="small")
