"""ProjectStore: named graph snapshots kept as JSON files in a directory.

One file per project (``<store>/<name>.json``). No locking and no
transactions: the last ``save`` for a name wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from archlab.domain.errors import ProjectNotFoundError
from archlab.domain.graph import DomainGraph
from archlab.domain.snapshot import export_graph, import_graph

logger = logging.getLogger(__name__)

SNAPSHOT_SUFFIX = ".json"


class ProjectStore:
    """Save, load, list and delete named graph snapshots."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def _path_for(self, name: str) -> Path:
        """Resolve the snapshot file for *name*, refusing names that escape the store."""
        if not name or name.strip() != name or name in {".", ".."}:
            msg = f"Invalid project name: {name!r}"
            raise ValueError(msg)
        path = self.root / f"{name}{SNAPSHOT_SUFFIX}"
        if path.resolve().parent != self.root.resolve():
            msg = f"Project name escapes store: {name!r}"
            raise ValueError(msg)
        return path

    def exists(self, name: str) -> bool:
        return self._path_for(name).is_file()

    def save(self, name: str, graph: DomainGraph) -> Path:
        """Write *graph* under *name*, replacing any previous snapshot."""
        path = self._path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(export_graph(graph), encoding="utf-8")
        logger.debug("Saved project %s to %s", name, path)
        return path

    def load(self, name: str) -> DomainGraph | None:
        """Return the stored graph, or None when *name* is unknown.

        Raises:
            GraphImportError: The stored snapshot is corrupt.
        """
        path = self._path_for(name)
        if not path.is_file():
            return None
        return import_graph(path.read_text(encoding="utf-8"))

    def list(self) -> list[str]:
        """Stored project names, sorted."""
        if not self.root.is_dir():
            return []
        return sorted(p.stem for p in self.root.glob(f"*{SNAPSHOT_SUFFIX}") if p.is_file())

    def delete(self, name: str) -> None:
        """Remove a stored project.

        Raises:
            ProjectNotFoundError: Nothing is stored under *name*.
        """
        path = self._path_for(name)
        if not path.is_file():
            msg = f"No project named {name!r}"
            raise ProjectNotFoundError(msg)
        path.unlink()
        logger.debug("Deleted project %s", name)
