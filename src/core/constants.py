"""Core constants used across Tripviz modules.

This module centralizes source defaults and fixed figure layout values.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_SOURCE_URI = "public_cases.json"
DEFAULT_OUTPUT_PATH = "trip_cases_3d.html"
DEFAULT_FETCH_TIMEOUT_SECONDS = 30.0
HTTP_URI_PREFIXES = ("http://", "https://")
HTML_OUTPUT_SUFFIXES = (".html", ".htm")
STATIC_OUTPUT_SUFFIXES = (".png",)
SUPPORTED_OUTPUT_SUFFIXES = HTML_OUTPUT_SUFFIXES + STATIC_OUTPUT_SUFFIXES

INPUT_FIELD_NAME = "input"
DURATION_FIELD_NAME = "trip_duration_days"
MILES_FIELD_NAME = "miles_traveled"
RECEIPTS_FIELD_NAME = "total_receipts_amount"
OUTPUT_FIELD_NAME = "expected_output"
REQUIRED_INPUT_FIELDS = (DURATION_FIELD_NAME, MILES_FIELD_NAME, RECEIPTS_FIELD_NAME)

PLOT_CONTAINER_ID = "plotContainer"
PLOT_TITLE = "3D Visualization: Output vs. Miles vs. Receipts (Grouped by Trip Duration)"
MILES_AXIS_TITLE = "Miles Traveled"
RECEIPTS_AXIS_TITLE = "Total Receipts Amount ($)"
OUTPUT_AXIS_TITLE = "Expected Output"
LEGEND_TITLE = "Trip Duration"
COLOR_SCALE_NAME = "Viridis"
MARKER_SIZE = 5
PLOT_MARGINS = {"l": 0, "r": 0, "b": 0, "t": 60}
STATIC_FIGURE_SIZE = (11.0, 8.5)
STATIC_FIGURE_DPI = 120

FORMAT_ERROR_MESSAGE = "JSON data is not in the expected format (must be a list)."
EMPTY_DATA_ERROR_MESSAGE = "No valid data groups found to plot."
