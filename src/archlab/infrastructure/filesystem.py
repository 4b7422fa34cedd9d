"""Filesystem output for generated source files.

Generated paths are rooted at ``/`` (``/Domain/Entities/Ride.cs``) and are
re-rooted under an output directory here. Node names are not sanitized by
the emitter, so this is where a crafted name is stopped from writing
outside the output directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from archlab.domain.emitter import GeneratedFile

logger = logging.getLogger(__name__)


def resolve_output_path(output_dir: Path, generated_path: str) -> Path:
    """Map a generated ``/``-rooted path to a file under *output_dir*.

    Raises:
        ValueError: The resolved path escapes *output_dir*.
    """
    result = output_dir / generated_path.lstrip("/")
    if not result.resolve().is_relative_to(output_dir.resolve()):
        msg = f"Path escapes output directory: {generated_path}"
        raise ValueError(msg)
    return result


def write_generated_files(files: Iterable[GeneratedFile], output_dir: Path) -> list[Path]:
    """Write *files* under *output_dir*, creating directories as needed.

    Every path is resolved before anything is written, so a rejected path
    leaves the output directory untouched. Files sharing a path are written
    in order, so the last one wins. Returns the written paths in emission
    order.

    Raises:
        ValueError: Any path escapes *output_dir*.
    """
    targets = [(resolve_output_path(output_dir, g.path), g) for g in files]
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for path, generated in targets:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(generated.content, encoding="utf-8")
        logger.debug("Wrote %s", path)
        written.append(path)
    return written
