"""Discover the packages of a Go module from ``go list -json``."""

from __future__ import annotations

import fnmatch
import json
import logging
import subprocess
from collections.abc import Iterator, Sequence
from pathlib import Path

from mainseq.errors import DiscoveryError
from mainseq.model import Package, PackageSet

logger = logging.getLogger(__name__)


def discover_packages(
    project_dir: Path, exclude: Sequence[str] | None = None
) -> PackageSet:
    """Return every package below *project_dir*, in ``go list`` order.

    Packages whose import path matches one of the *exclude* glob patterns
    are left out of the set.
    """
    output = _run_go_list(project_dir)
    packages = PackageSet()
    for entry in _decode_stream(output):
        full_name = entry.get("ImportPath")
        if not full_name:
            continue
        if exclude and any(fnmatch.fnmatchcase(full_name, p) for p in exclude):
            logger.debug("Excluding package %s", full_name)
            continue
        packages.add(
            Package(
                name=entry.get("Name", full_name.rsplit("/", 1)[-1]),
                full_name=full_name,
                imports=list(entry.get("Imports") or []),
                dir=Path(entry.get("Dir") or project_dir),
                go_files=list(entry.get("GoFiles") or []),
            )
        )

    logger.debug("go list: %d package(s)", len(packages))
    return packages


def _decode_stream(output: str) -> Iterator[dict]:
    decoder = json.JSONDecoder()
    pos = 0
    end = len(output)
    while True:
        while pos < end and output[pos].isspace():
            pos += 1
        if pos >= end:
            return
        try:
            obj, pos = decoder.raw_decode(output, pos)
        except json.JSONDecodeError as e:
            raise DiscoveryError(f"go list JSON parse error: {e}") from e
        if not isinstance(obj, dict):
            raise DiscoveryError(
                f"go list produced unexpected {type(obj).__name__} at offset {pos}"
            )
        yield obj


def _run_go_list(project_dir: Path) -> str:
    """Run ``go list -json ./...`` and return its standard output."""
    try:
        result = subprocess.run(
            ["go", "list", "-json", "./..."],
            capture_output=True,
            text=True,
            cwd=str(project_dir),
            timeout=300,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        raise DiscoveryError(f"Could not run go list: {e}") from e

    if result.returncode != 0:
        raise DiscoveryError(
            "go list failed: "
            + (result.stderr.strip() if result.stderr else "unknown error")
        )
    return result.stdout
