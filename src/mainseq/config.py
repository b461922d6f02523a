"""Read optional project settings from ``.mainseq.toml``."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE = ".mainseq.toml"


@dataclass
class Settings:
    parallel: int | None = None
    exclude: list[str] = field(default_factory=list)


def read_config(project_dir: Path) -> Settings:
    """Return the ``[mainseq]`` table of *project_dir*/.mainseq.toml, if any.

    A missing file yields default settings; an unreadable or malformed one
    is reported and ignored.
    """
    config_path = project_dir / CONFIG_FILE
    if not config_path.exists():
        return Settings()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring %s: %s", config_path, e)
        return Settings()

    table = data.get("mainseq", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring invalid [mainseq] in %s", config_path)
        return Settings()

    settings = Settings()

    parallel = table.get("parallel")
    if isinstance(parallel, int) and not isinstance(parallel, bool) and parallel >= 1:
        settings.parallel = parallel
    elif parallel is not None:
        logger.warning("Ignoring invalid parallel=%r in %s", parallel, config_path)

    exclude = table.get("exclude", [])
    if isinstance(exclude, list) and all(isinstance(p, str) for p in exclude):
        settings.exclude = exclude
    else:
        logger.warning("Ignoring invalid exclude=%r in %s", exclude, config_path)

    return settings
