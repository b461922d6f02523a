from __future__ import annotations

from pathlib import Path

import pytest

from mainseq.model import Package, PackageSet

ONE_FUNC = b"package p\n\nfunc F() int {\n\treturn 1\n}\n"


@pytest.fixture
def make_package(tmp_path: Path):
    """Create a package directory holding the given files and return its Package."""

    def _make(
        full_name: str, files: dict[str, bytes], imports: list[str] | None = None
    ) -> Package:
        pkg_dir = tmp_path / full_name.replace("/", "_")
        pkg_dir.mkdir(parents=True, exist_ok=True)
        for name, source in files.items():
            (pkg_dir / name).write_bytes(source)
        return Package(
            name=full_name.rsplit("/", 1)[-1],
            full_name=full_name,
            imports=list(imports or []),
            dir=pkg_dir,
            go_files=list(files),
        )

    return _make


def package_set(*packages: Package) -> PackageSet:
    result = PackageSet()
    for package in packages:
        result.add(package)
    return result
