"""Orchestrator: discover → analyse → render."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from mainseq.analysis import (
    calculate_distance,
    calculate_stability,
    gather_depended_on_by_count,
)
from mainseq.config import read_config
from mainseq.errors import DiscoveryError, PackageScanError
from mainseq.extractors.go import discover_packages, is_go_project
from mainseq.model import PackageSet
from mainseq.renderer.json_report import render_json
from mainseq.renderer.table import TableStyle, render_table
from mainseq.scanner import PackageScanner

logger = logging.getLogger(__name__)


def analyse(packages: PackageSet, scanner: PackageScanner) -> PackageSet:
    """Enrich *packages* in place with all coupling metrics and return it.

    Fan-in and abstractness are complete for every package before any
    stability or distance is computed.
    """
    gather_depended_on_by_count(packages)
    scanner.scan_all(packages)
    calculate_stability(packages)
    calculate_distance(packages)
    return packages


def _report_scan_failure(error: PackageScanError) -> None:
    logger.error("%s", error)
    logger.error("listing error(s):")
    for cause in error.errors:
        logger.error("%s", cause)
    logger.error("Please fix these before continuing.")


def run(
    project_dir: Path,
    *,
    parallel: int | None = None,
    exclude: Sequence[str] | None = None,
    output_format: str = "table",
    output: Path | None = None,
    color: bool = True,
) -> PackageSet:
    """Run the full mainseq pipeline and return the analysed packages.

    Exits the process with status 1 if discovery or any package scan fails;
    nothing is rendered in that case.
    """
    project_dir = project_dir.resolve()
    settings = read_config(project_dir)
    parallel = parallel or settings.parallel or os.cpu_count() or 1
    patterns = [*settings.exclude, *(exclude or [])]

    if not is_go_project(project_dir):
        logger.error("Could not find go.mod in %s.", project_dir)
        sys.exit(1)

    logger.debug("Project: %s, parallel: %d", project_dir, parallel)

    try:
        packages = discover_packages(project_dir, exclude=patterns)
    except DiscoveryError as e:
        logger.error("%s", e)
        sys.exit(1)

    try:
        analyse(packages, PackageScanner(parallel))
    except PackageScanError as e:
        _report_scan_failure(e)
        sys.exit(1)

    if output_format == "json":
        data = render_json(packages, output)
        if output is None:
            print(data)
        else:
            logger.info("Generated %s", output)
    else:
        render_table(packages, TableStyle(color=color))

    return packages
