"""Render package metrics as a colored terminal table."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from mainseq.model import PackageSet


@dataclass(frozen=True)
class TableStyle:
    """Colors used by :func:`render_table`."""

    color: bool = True
    key: str = "bold white"
    stable: str = "bold green"  # stability < 0.5
    balanced: str = "yellow"  # 0.5 <= stability < 1
    unstable: str = "red"  # stability == 1

    def for_stability(self, stability: float | None) -> str:
        if not self.color or stability is None or math.isnan(stability):
            return ""
        if stability < 0.5:
            return self.stable
        if stability < 1:
            return self.balanced
        return self.unstable


def format_metric(value: float | None) -> str:
    if value is None:
        return "-"
    if math.isnan(value):
        return "NaN"
    return f"{value:.1f}"


def build_table(packages: PackageSet, style: TableStyle | None = None) -> Table:
    style = style or TableStyle()
    key = style.key if style.color else ""

    table = Table(box=box.ASCII)
    table.add_column("NAME")
    table.add_column("STABILITY", justify="right")
    table.add_column("ABSTRACTNESS", justify="right", style=key)
    table.add_column("DISTANCE", justify="right", style=key)

    for package in packages:
        stability = Text(
            format_metric(package.stability),
            style=style.for_stability(package.stability),
        )
        table.add_row(
            package.full_name,
            stability,
            format_metric(package.abstractness),
            format_metric(package.distance_from_median),
        )
    return table


def render_table(
    packages: PackageSet,
    style: TableStyle | None = None,
    console: Console | None = None,
) -> None:
    """Print the metrics of every package in presentation order."""
    style = style or TableStyle()
    console = console or Console(no_color=not style.color)
    console.print(build_table(packages, style))
