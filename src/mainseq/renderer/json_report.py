"""Serialize package metrics to JSON."""

from __future__ import annotations

import json
import math
from pathlib import Path

from mainseq.model import Package, PackageSet


def _metric(value: float | None) -> float | None:
    if value is None or math.isnan(value):
        return None
    return value


def _package_to_dict(package: Package) -> dict:
    return {
        "name": package.name,
        "full_name": package.full_name,
        "import_count": int(package.import_count),
        "depended_on_by_count": int(package.depended_on_by_count),
        "stability": _metric(package.stability),
        "abstractness": _metric(package.abstractness),
        "distance_from_median": _metric(package.distance_from_median),
    }


def packages_to_json(packages: PackageSet) -> str:
    """Return the metrics of *packages* as a JSON array, undefined values as null."""
    return json.dumps([_package_to_dict(p) for p in packages], indent=2)


def render_json(packages: PackageSet, output_path: Path | None = None) -> str:
    """Write the JSON report to *output_path* if given, and return it."""
    data = packages_to_json(packages)
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(data + "\n")
    return data
