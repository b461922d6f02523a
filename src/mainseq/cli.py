"""Command-line interface for mainseq."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from mainseq.pipeline import run


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="mainseq",
        description="Stability, abstractness and distance from the main sequence for Go packages.",
    )
    parser.add_argument(
        "project_dir",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Path to the Go module to analyse (default: current directory)",
    )
    parser.add_argument(
        "-p",
        "--parallel",
        type=_positive_int,
        default=None,
        help="Maximum number of files scanned at once (default: CPU count)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Skip packages whose import path matches this glob (repeatable)",
    )
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        dest="output_format",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the JSON report to this file instead of stdout",
    )
    parser.add_argument(
        "--no-color",
        action="store_false",
        dest="color",
        help="Disable colored output",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if args.verbose:
        logging.getLogger("mainseq").setLevel(logging.DEBUG)
    elif args.quiet:
        logging.getLogger("mainseq").setLevel(logging.WARNING)

    run(
        args.project_dir,
        parallel=args.parallel,
        exclude=args.exclude,
        output_format=args.output_format,
        output=args.output,
        color=args.color,
    )
