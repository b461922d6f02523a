"""Exceptions raised while discovering and scanning packages."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mainseq.model import Package


class MainseqError(Exception):
    """Base class for all mainseq failures."""


class DiscoveryError(MainseqError):
    """The package list could not be obtained from the Go toolchain."""


class SourceError(MainseqError):
    """A single source file could not be processed."""

    def __init__(self, path: Path | str, cause: object) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class ReadError(SourceError):
    """A source file could not be read."""


class ParseError(SourceError):
    """A source file is not syntactically valid Go."""


class PackageScanError(MainseqError):
    """One or more files of a package failed to scan."""

    def __init__(self, package: Package, errors: list[SourceError]) -> None:
        self.package = package
        self.errors = list(errors)
        super().__init__(
            f"{len(self.errors)} error(s) processing pkg {package.full_name}"
        )
