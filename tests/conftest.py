"""Pytest configuration and shared fixtures for Tripviz tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove TRIPVIZ_* overrides so config defaults apply."""
    for name in ("TRIPVIZ_SOURCE", "TRIPVIZ_OUTPUT", "TRIPVIZ_FETCH_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def single_case_payload() -> list[dict[str, Any]]:
    """One well-formed case record."""
    return [
        {
            "input": {
                "trip_duration_days": 1,
                "miles_traveled": 100,
                "total_receipts_amount": 50.5,
            },
            "expected_output": 120.25,
        }
    ]
