"""Scan package sources concurrently and compute their abstractness."""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from mainseq.errors import PackageScanError, ReadError, SourceError
from mainseq.extractors.go.classifier import DeclarationCounts, classify_source
from mainseq.model import Package

logger = logging.getLogger(__name__)

SourceReader = Callable[[Path], bytes]


def read_source(path: Path) -> bytes:
    """Read a source file, raising :class:`ReadError` on failure."""
    try:
        return path.read_bytes()
    except OSError as e:
        raise ReadError(path, e.strerror or e) from e


def abstractness(counts: DeclarationCounts) -> float:
    """Return abstractions per concretion, or NaN when there are no functions."""
    if counts.concretions == 0:
        return math.nan
    return counts.abstractions / counts.concretions


class PackageScanner:
    """Classify the files of packages with bounded parallelism.

    A single semaphore of *max_concurrency* slots is shared by every file
    task the scanner runs, across all packages, so at most that many files
    are being read and parsed at any moment.
    """

    def __init__(
        self, max_concurrency: int, reader: SourceReader = read_source
    ) -> None:
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")
        self.max_concurrency = max_concurrency
        self._slots = threading.BoundedSemaphore(max_concurrency)
        self._reader = reader

    def count(self, package: Package) -> DeclarationCounts:
        """Sum the declaration counts of every file in *package*.

        All files are scanned even if some fail; the failures are then
        raised together as a :class:`PackageScanError`.
        """
        if not package.go_files:
            return DeclarationCounts()

        workers = min(len(package.go_files), self.max_concurrency)
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="mainseq-scan"
        ) as executor:
            futures = [
                executor.submit(self._scan_file, package.dir / name)
                for name in package.go_files
            ]

        total = DeclarationCounts()
        errors: list[SourceError] = []
        for future in futures:
            exc = future.exception()
            if exc is None:
                total += future.result()
            elif isinstance(exc, SourceError):
                errors.append(exc)
            else:
                raise exc

        if errors:
            logger.debug(
                "%d error(s) processing pkg %s", len(errors), package.full_name
            )
            raise PackageScanError(package, errors)
        return total

    def scan(self, package: Package) -> float:
        """Return the abstractness of *package*."""
        logger.info(
            "Scanning %d go file(s) in package %s.",
            len(package.go_files),
            package.full_name,
        )
        counts = self.count(package)
        logger.debug(
            "%s: %d concretion(s), %d abstraction(s)",
            package.full_name,
            counts.concretions,
            counts.abstractions,
        )
        return abstractness(counts)

    def scan_all(self, packages: Iterable[Package]) -> None:
        """Set ``abstractness`` on every package, stopping at the first failure."""
        for package in packages:
            package.abstractness = self.scan(package)

    def _scan_file(self, path: Path) -> DeclarationCounts:
        with self._slots:
            source = self._reader(path)
            return classify_source(source, path)
