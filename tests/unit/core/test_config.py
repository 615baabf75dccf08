"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import TripvizConfig, parse_output_path
from core.constants import DEFAULT_FETCH_TIMEOUT_SECONDS, DEFAULT_SOURCE_URI
from core.errors import TripvizConfigError


def test_from_env_uses_defaults(clean_env: pytest.MonkeyPatch) -> None:
    """Config should fall back to the bundled source and timeout defaults."""
    config = TripvizConfig.from_env()

    assert config.source_uri == DEFAULT_SOURCE_URI
    assert config.fetch_timeout_seconds == DEFAULT_FETCH_TIMEOUT_SECONDS
    assert config.output_path.suffix == ".html"


def test_from_env_reads_overrides(clean_env: pytest.MonkeyPatch) -> None:
    """Config should honor source, output, and timeout overrides."""
    clean_env.setenv("TRIPVIZ_SOURCE", "https://example.test/cases.json")
    clean_env.setenv("TRIPVIZ_OUTPUT", "out/chart.png")
    clean_env.setenv("TRIPVIZ_FETCH_TIMEOUT", "none")

    config = TripvizConfig.from_env()

    assert config.source_uri == "https://example.test/cases.json"
    assert config.output_path.name == "chart.png"
    assert config.fetch_timeout_seconds is None


def test_from_env_raises_for_invalid_timeout(clean_env: pytest.MonkeyPatch) -> None:
    """Config should fail for non-numeric fetch timeout."""
    clean_env.setenv("TRIPVIZ_FETCH_TIMEOUT", "soon")

    with pytest.raises(TripvizConfigError):
        TripvizConfig.from_env()


def test_from_env_raises_for_non_positive_timeout(clean_env: pytest.MonkeyPatch) -> None:
    """Config should reject zero and negative timeouts."""
    clean_env.setenv("TRIPVIZ_FETCH_TIMEOUT", "0")

    with pytest.raises(TripvizConfigError):
        TripvizConfig.from_env()


def test_parse_output_path_rejects_unknown_suffix() -> None:
    """Output path should require a suffix with a renderer."""
    with pytest.raises(TripvizConfigError):
        parse_output_path("chart.svg")

    assert parse_output_path("chart.HTML").suffix == ".HTML"
