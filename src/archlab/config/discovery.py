"""Locate ``archlab.toml``.

An explicit ``ARCHLAB_CONFIG`` wins. Otherwise the search walks from the
start directory up to the filesystem root, so commands run anywhere inside
a project pick up the project's file.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "archlab.toml"
CONFIG_ENV_VAR = "ARCHLAB_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    resolved = start.resolve()
    yield resolved
    yield from resolved.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A set ``ARCHLAB_CONFIG`` that points at no file yields None rather
    than falling back to the walk-up search.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
