"""Go extractors — shared helpers."""

from __future__ import annotations

from pathlib import Path

from mainseq.extractors.go.classifier import DeclarationCounts, classify_source
from mainseq.extractors.go.go_list import discover_packages

__all__ = [
    "DeclarationCounts",
    "classify_source",
    "discover_packages",
    "is_go_project",
]


def is_go_project(project_dir: Path) -> bool:
    """Return True if *project_dir* contains a go.mod."""
    return (project_dir / "go.mod").exists()
