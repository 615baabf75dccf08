"""Public SDK surface for Tripviz.

This module provides a stable import path for library users.
It re-exports the pipeline entry points and typed models.
"""

from __future__ import annotations

from core.config import TripvizConfig
from core.types import (
    CaseLoadResult,
    DurationGroup,
    PlotTrace,
    TripRecord,
    VisualizationOptions,
    VisualizationOutcome,
    VisualizationResult,
)
from ingest.pipeline import load_duration_groups, render_visualization, visualize_cases
from ingest.record_validation import parse_case_records
from render.plotly_renderer import build_figure
from transforms.duration_grouping import group_by_duration
from transforms.trace_builder import build_plot_traces

__all__ = [
    "CaseLoadResult",
    "DurationGroup",
    "PlotTrace",
    "TripRecord",
    "TripvizConfig",
    "VisualizationOptions",
    "VisualizationOutcome",
    "VisualizationResult",
    "build_figure",
    "build_plot_traces",
    "group_by_duration",
    "load_duration_groups",
    "parse_case_records",
    "render_visualization",
    "visualize_cases",
]
