"""Runtime configuration model for Tripviz.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from core.constants import (
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SOURCE_URI,
    SUPPORTED_OUTPUT_SUFFIXES,
)
from core.errors import TripvizConfigError


@dataclass(frozen=True)
class TripvizConfig:
    """Validated runtime configuration.

    Attributes:
        source_uri: Default JSON source, a local path or http(s) URL.
        output_path: Default chart output file (``.html`` or ``.png``).
        fetch_timeout_seconds: HTTP timeout in seconds, or None to disable.
    """

    source_uri: str
    output_path: Path
    fetch_timeout_seconds: float | None

    @classmethod
    def from_env(cls) -> "TripvizConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TripvizConfigError: If environment values are invalid.
        """
        source_uri = os.getenv("TRIPVIZ_SOURCE", DEFAULT_SOURCE_URI).strip()
        if not source_uri:
            raise TripvizConfigError(
                "Invalid TRIPVIZ_SOURCE value: expected a path or URL, got an empty string. "
                "Unset TRIPVIZ_SOURCE to use the default source."
            )
        output_value = os.getenv("TRIPVIZ_OUTPUT", DEFAULT_OUTPUT_PATH)
        timeout_value = os.getenv("TRIPVIZ_FETCH_TIMEOUT", str(DEFAULT_FETCH_TIMEOUT_SECONDS))
        return cls(
            source_uri=source_uri,
            output_path=parse_output_path(output_value),
            fetch_timeout_seconds=_parse_fetch_timeout(timeout_value),
        )


def parse_output_path(raw_value: str) -> Path:
    """Parse and validate a chart output path.

    Args:
        raw_value: Raw path string from environment or CLI.

    Returns:
        Expanded output path.

    Raises:
        TripvizConfigError: If the path suffix has no renderer.
    """
    output_path = Path(raw_value).expanduser()
    if output_path.suffix.lower() not in SUPPORTED_OUTPUT_SUFFIXES:
        raise TripvizConfigError(
            f"Unsupported output path '{raw_value}': "
            f"expected one of {SUPPORTED_OUTPUT_SUFFIXES}. "
            "Use .html for an interactive chart or .png for a static image."
        )
    return output_path


def _parse_fetch_timeout(raw_value: str) -> float | None:
    """Parse the fetch timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds, or None when disabled.

    Raises:
        TripvizConfigError: If value is not a positive number or ``none``.
    """
    if raw_value.strip().lower() == "none":
        return None
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise TripvizConfigError(
            "Invalid TRIPVIZ_FETCH_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set TRIPVIZ_FETCH_TIMEOUT to a positive number or 'none'."
        ) from error
    if timeout <= 0:
        raise TripvizConfigError(
            f"Invalid TRIPVIZ_FETCH_TIMEOUT value: expected a positive number, got {timeout}."
        )
    return timeout
