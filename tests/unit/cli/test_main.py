"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import case_fixture


def test_cli_plot_writes_chart(tmp_path: Path, clean_env: pytest.MonkeyPatch, capsys) -> None:
    """CLI plot should print the written chart summary."""
    output_path = tmp_path / "chart.html"
    args = ["--source", case_fixture("sample_cases.json"), "plot", "--output", str(output_path)]

    exit_code = main(args)
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert f"output_path={output_path}" in output
    assert "group_count=3" in output and "skipped_count=2" in output
    assert output_path.exists()


def test_cli_plot_uses_env_output(tmp_path: Path, clean_env: pytest.MonkeyPatch, capsys) -> None:
    """CLI plot should fall back to TRIPVIZ_OUTPUT when --output is absent."""
    output_path = tmp_path / "env-chart.png"
    clean_env.setenv("TRIPVIZ_OUTPUT", str(output_path))
    clean_env.setenv("TRIPVIZ_SOURCE", case_fixture("sample_cases.json"))

    exit_code = main(["plot"])
    _ = capsys.readouterr()

    assert exit_code == 0 and output_path.exists()


def test_cli_plot_returns_one_on_format_error(
    tmp_path: Path, clean_env: pytest.MonkeyPatch, capsys
) -> None:
    """CLI plot should print the user-visible error and exit one."""
    output_path = tmp_path / "chart.html"
    args = ["--source", case_fixture("not_a_list.json"), "plot", "--output", str(output_path)]

    exit_code = main(args)
    output = capsys.readouterr().out

    assert exit_code == 1
    assert output.startswith("error=Error: JSON data is not in the expected format")


def test_cli_plot_rejects_unsupported_output(clean_env: pytest.MonkeyPatch, capsys) -> None:
    """CLI plot should refuse output suffixes without a renderer."""
    exit_code = main(["plot", "--output", "chart.svg"])
    output = capsys.readouterr().out

    assert exit_code == 1 and output.startswith("error=Unsupported output path")


def test_cli_summary_prints_group_rows(clean_env: pytest.MonkeyPatch, capsys) -> None:
    """CLI summary should print one row per duration in ascending order."""
    exit_code = main(["--source", case_fixture("sample_cases.json"), "summary"])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert output == [
        "1\t2\t126.06\t128.91",
        "2\t1\t203.52\t203.52",
        "3\t2\t364.51\t380.37",
        "skipped_count=2",
    ]


def test_cli_summary_handles_missing_source(
    tmp_path: Path, clean_env: pytest.MonkeyPatch, capsys
) -> None:
    """CLI summary should print a friendly error for a missing source."""
    exit_code = main(["--source", str(tmp_path / "missing.json"), "summary"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=Failed to read source")


def test_cli_summary_reports_integer_past_digit_limit(
    tmp_path: Path, clean_env: pytest.MonkeyPatch, capsys
) -> None:
    """CLI summary should print a format error for an unparseable integer literal."""
    source_path = tmp_path / "huge_integer.json"
    source_path.write_text("9" * 5000, encoding="utf-8")

    exit_code = main(["--source", str(source_path), "summary"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=Failed to parse JSON")


def test_cli_summary_skips_oversized_number(
    tmp_path: Path, clean_env: pytest.MonkeyPatch, capsys
) -> None:
    """CLI summary should drop a record whose number exceeds float range."""
    source_path = tmp_path / "oversized.json"
    source_path.write_text(
        '[{"input": {"trip_duration_days": 1, "miles_traveled": 100, '
        '"total_receipts_amount": 50.5}, "expected_output": 120.25}, '
        '{"input": {"trip_duration_days": 2, "miles_traveled": 1' + "0" * 400 + ", "
        '"total_receipts_amount": 5.0}, "expected_output": 80.0}]',
        encoding="utf-8",
    )

    exit_code = main(["--source", str(source_path), "summary"])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert output == ["1\t1\t120.25\t120.25", "skipped_count=1"]


def test_cli_summary_reports_unexpected_errors(
    clean_env: pytest.MonkeyPatch, capsys
) -> None:
    """CLI summary should print an error line instead of a traceback."""

    async def explode(source_uri, config):
        raise RuntimeError("grouping failure")

    clean_env.setattr("cli.main.load_duration_groups", explode)

    exit_code = main(["--source", case_fixture("sample_cases.json"), "summary"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1
    assert output == (
        "error=Failed to load visualization: grouping failure. "
        "Check the log output for more details."
    )
