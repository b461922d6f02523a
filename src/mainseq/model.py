"""Data model for packages and their coupling metrics."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path


def is_undefined(value: float | None) -> bool:
    """Return True if *value* carries no usable metric (unset or NaN)."""
    return value is None or math.isnan(value)


@dataclass
class Package:
    """A single Go package as reported by ``go list``."""

    name: str
    full_name: str
    imports: list[str] = field(default_factory=list)
    dir: Path = field(default_factory=Path)
    go_files: list[str] = field(default_factory=list)
    depended_on_by_count: float = 0.0
    stability: float | None = None
    abstractness: float | None = None
    distance_from_median: float | None = None

    @property
    def import_count(self) -> float:
        return float(len(self.imports))


class PackageSet:
    """Packages keyed by import path, remembering discovery order."""

    def __init__(self) -> None:
        self._packages: dict[str, Package] = {}
        self._names: list[str] = []

    def add(self, package: Package) -> None:
        if package.full_name in self._packages:
            raise ValueError(f"duplicate package {package.full_name!r}")
        self._packages[package.full_name] = package
        self._names.append(package.full_name)

    @property
    def names(self) -> list[str]:
        """Import paths in presentation order."""
        return list(self._names)

    def __getitem__(self, full_name: str) -> Package:
        return self._packages[full_name]

    def __contains__(self, full_name: object) -> bool:
        return full_name in self._packages

    def __len__(self) -> int:
        return len(self._packages)

    def __iter__(self) -> Iterator[Package]:
        for name in self._names:
            yield self._packages[name]

    def get(self, full_name: str) -> Package | None:
        return self._packages.get(full_name)
