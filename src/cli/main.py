"""Tripviz CLI entry points.

This module exposes the plot and summary commands.
It maps argparse commands onto pipeline calls.
"""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import replace
from typing import Any, Sequence

from core.config import TripvizConfig, parse_output_path
from core.errors import TripvizError
from core.types import VisualizationOptions
from ingest.pipeline import failure_message, load_duration_groups, visualize_cases


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="tripviz", description="Trip case 3D visualization CLI")
    parser.add_argument("--source", help="Override TRIPVIZ_SOURCE for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_plot_command(subparsers)
    _add_summary_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Tripviz CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.source)
    except TripvizError as error:
        print(f"error={error}")
        return 1
    if args.command == "plot":
        return _run_plot_command(config, args)
    if args.command == "summary":
        return _run_summary_command(config)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(source: str | None) -> TripvizConfig:
    """Build config with optional source override.

    Args:
        source: Optional source path or URL.

    Returns:
        Validated config.
    """
    config = TripvizConfig.from_env()
    if source:
        config = replace(config, source_uri=source)
    return config


def _run_plot_command(config: TripvizConfig, args: argparse.Namespace) -> int:
    """Handle plot command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        output_path = parse_output_path(args.output) if args.output else config.output_path
    except TripvizError as error:
        print(f"error={error}")
        return 1
    options = VisualizationOptions(source_uri=config.source_uri, output_path=output_path)
    outcome = asyncio.run(visualize_cases(options, config))
    if not outcome.succeeded or outcome.result is None:
        print(f"error={outcome.message}")
        if outcome.output_path is not None:
            print(f"output_path={outcome.output_path}")
        return 1
    result = outcome.result
    print(f"output_path={result.output_path}")
    print(f"group_count={result.group_count}")
    print(f"point_count={result.point_count}")
    print(f"skipped_count={result.skipped_count}")
    return 0


def _run_summary_command(config: TripvizConfig) -> int:
    """Handle summary command.

    Args:
        config: Runtime config.

    Returns:
        Exit code.
    """
    try:
        load_result = asyncio.run(load_duration_groups(config.source_uri, config))
    except TripvizError as error:
        print(f"error={error}")
        return 1
    except Exception as error:
        print(f"error={failure_message(error)}")
        return 1
    for group in load_result.groups:
        outputs = [record.expected_output for record in group.records]
        print(f"{group.duration}\t{group.point_count}\t{min(outputs):.2f}\t{max(outputs):.2f}")
    print(f"skipped_count={len(load_result.skipped_indexes)}")
    return 0


def _add_plot_command(subparsers: Any) -> None:
    """Register plot subcommand."""
    parser = subparsers.add_parser("plot", help="Render the grouped 3D scatter chart")
    parser.add_argument(
        "--output",
        help="Chart path; .html for interactive, .png for static (overrides TRIPVIZ_OUTPUT)",
    )


def _add_summary_command(subparsers: Any) -> None:
    """Register summary subcommand."""
    subparsers.add_parser("summary", help="Print per-duration group counts and output ranges")
