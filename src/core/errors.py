"""Tripviz exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline step raises a specific error type for debuggability.
"""

from __future__ import annotations


class TripvizError(Exception):
    """Base exception for all Tripviz failures."""


class TripvizConfigError(TripvizError):
    """Raised for invalid runtime configuration."""


class TripvizFetchError(TripvizError):
    """Raised for transport, HTTP status, and local read failures."""


class TripvizFormatError(TripvizError):
    """Raised when the source payload is not a JSON list."""


class TripvizEmptyDataError(TripvizError):
    """Raised when no valid record survives validation."""


class TripvizRenderError(TripvizError):
    """Raised for figure construction and output write failures."""


class TripvizDependencyError(TripvizError):
    """Raised when an optional runtime dependency is missing."""
