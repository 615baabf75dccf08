"""Chart and error output dispatch.

This module picks a renderer from the output suffix and writes
failure text into the chart's display region.
"""

from __future__ import annotations

import html
from pathlib import Path
from typing import Sequence

from core.constants import HTML_OUTPUT_SUFFIXES, PLOT_CONTAINER_ID, STATIC_OUTPUT_SUFFIXES
from core.errors import TripvizConfigError, TripvizRenderError
from core.types import PlotTrace
from render.plotly_renderer import build_figure, write_figure_html
from render.static_renderer import save_static_figure

_ERROR_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Trip Case Visualization</title></head>
<body>
<div id="{container_id}">{message}</div>
</body>
</html>
"""


def render_traces(traces: Sequence[PlotTrace], output_path: Path) -> Path:
    """Render traces to ``output_path`` using the suffix's renderer.

    Args:
        traces: Ordered, non-empty trace list.
        output_path: ``.html``/``.htm`` or ``.png`` destination.

    Returns:
        Written output path.

    Raises:
        TripvizConfigError: If the suffix has no renderer.
        TripvizRenderError: If rendering fails.
    """
    suffix = output_path.suffix.lower()
    if suffix in HTML_OUTPUT_SUFFIXES:
        return write_figure_html(build_figure(traces), output_path)
    if suffix in STATIC_OUTPUT_SUFFIXES:
        return save_static_figure(traces, output_path)
    raise TripvizConfigError(
        f"Unsupported output suffix '{output_path.suffix}' for {output_path}. "
        "Use .html for an interactive chart or .png for a static image."
    )


def write_error_output(output_path: Path, message: str) -> Path | None:
    """Write failure text into the HTML display region.

    Args:
        output_path: Chart destination path.
        message: Plain-text failure message.

    Returns:
        Written page path, or None when the output is not an HTML page.

    Raises:
        TripvizRenderError: If the page cannot be written.
    """
    if output_path.suffix.lower() not in HTML_OUTPUT_SUFFIXES:
        return None
    page = _ERROR_PAGE_TEMPLATE.format(
        container_id=PLOT_CONTAINER_ID, message=html.escape(message)
    )
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(page, encoding="utf-8")
    except OSError as error:
        raise TripvizRenderError(
            f"Failed to write error page to {output_path}: {error}."
        ) from error
    return output_path
