"""Fan-in, stability and distance from the main sequence.

Stability is ``fan-out / (fan-out + fan-in)``: 0 for a package that only
others depend on, 1 for one that depends on others but nothing depends on.
Distance is ``|stability + abstractness - 1|``:

- 0: on the main sequence
- 1: as far from it as possible
- stability 0, abstractness 0: zone of pain
- stability 1, abstractness 1: zone of uselessness

Undefined ratios (0/0) are NaN and propagate into the distance.
"""

from __future__ import annotations

import math

from mainseq.model import PackageSet


def gather_depended_on_by_count(packages: PackageSet) -> None:
    """Count, for each package, the in-scope packages that import it.

    Imports of packages outside *packages* are ignored. Counts are added to
    the existing values, so this must run once per freshly discovered set.
    """
    for package in packages:
        for name in package.imports:
            target = packages.get(name)
            if target is not None:
                target.depended_on_by_count += 1


def calculate_stability(packages: PackageSet) -> None:
    for package in packages:
        total = package.import_count + package.depended_on_by_count
        package.stability = package.import_count / total if total else math.nan


def calculate_distance(packages: PackageSet) -> None:
    """Compute the distance from the main sequence for every package.

    Stability and abstractness must already be set on all packages.
    """
    for package in packages:
        if package.stability is None or package.abstractness is None:
            raise ValueError(
                f"package {package.full_name} has not been fully analysed"
            )
        package.distance_from_median = abs(
            package.stability + package.abstractness - 1
        )
