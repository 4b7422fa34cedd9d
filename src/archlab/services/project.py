"""ProjectService: named graph snapshots in the workspace store.

Covers the persistence collaborator surface: init (empty or starter),
save, load, list, delete, export to JSON text, import from a file.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archlab.domain.errors import ArchlabError, ProjectNotFoundError
from archlab.domain.graph import DomainGraph
from archlab.domain.snapshot import export_graph, graph_to_dict, import_graph
from archlab.domain.starter import starter_graph
from archlab.services.base import BaseService
from archlab.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from archlab.infrastructure.store import ProjectStore

logger = logging.getLogger(__name__)


def _summary(graph: DomainGraph) -> dict[str, int]:
    return {
        "value_objects": len(graph.value_objects),
        "entities": len(graph.entities),
        "aggregates": len(graph.aggregates),
        "repositories": len(graph.repositories),
        "use_cases": len(graph.use_cases),
    }


class ProjectService(BaseService):
    """Manage stored projects."""

    @property
    def _store(self) -> ProjectStore:
        return self._workspace.store

    def _load_required(self, name: str) -> DomainGraph:
        graph = self._store.load(name)
        if graph is None:
            msg = f"No project named {name!r}"
            raise ProjectNotFoundError(msg)
        return graph

    def init(self, name: str, *, starter: bool = False, force: bool = False) -> ServiceResult:
        """Create a project from the starter graph or an empty graph."""
        try:
            if self._store.exists(name) and not force:
                return ServiceResult.failure(
                    "init",
                    "PROJECT_EXISTS",
                    f"Project {name!r} already exists (use --force to replace it)",
                    name=name,
                )
            graph = starter_graph(name) if starter else DomainGraph.empty(name)
            path = self._store.save(name, graph)
        except (ValueError, OSError) as exc:
            return self._failure("init", exc, name=name)

        return ServiceResult(
            ok=True,
            op="init",
            data={"name": name, "path": str(path), "starter": starter, **_summary(graph)},
        )

    def save(self, name: str, graph: DomainGraph) -> ServiceResult:
        """Store *graph* under *name*; last write wins."""
        try:
            path = self._store.save(name, graph)
        except (ValueError, OSError) as exc:
            return self._failure("save", exc, name=name)
        return ServiceResult(ok=True, op="save", data={"name": name, "path": str(path)})

    def load(self, name: str) -> ServiceResult:
        """Return the stored snapshot under ``data["graph"]``."""
        try:
            graph = self._load_required(name)
        except (ArchlabError, ValueError) as exc:
            return self._failure("load", exc, name=name)
        return ServiceResult(
            ok=True,
            op="load",
            data={
                "name": name,
                "meta": graph.meta.model_dump(),
                **_summary(graph),
                "graph": graph_to_dict(graph),
            },
        )

    def list_projects(self) -> ServiceResult:
        names = self._store.list()
        return ServiceResult(
            ok=True,
            op="list_projects",
            data={"items": [{"id": n} for n in names], "count": len(names)},
        )

    def delete(self, name: str) -> ServiceResult:
        try:
            self._store.delete(name)
        except (ArchlabError, ValueError, OSError) as exc:
            return self._failure("delete", exc, name=name)
        logger.debug("Deleted project %s", name)
        return ServiceResult(ok=True, op="delete", data={"name": name})

    def export(self, name: str) -> ServiceResult:
        """Return the snapshot JSON text under ``data["content"]``."""
        try:
            graph = self._load_required(name)
        except (ArchlabError, ValueError) as exc:
            return self._failure("export", exc, name=name)
        return ServiceResult(
            ok=True,
            op="export",
            data={"name": name, "content": export_graph(graph)},
        )

    def import_file(self, path: Path, *, name: str | None = None) -> ServiceResult:
        """Import a snapshot file into the store.

        The project is stored under *name*, defaulting to ``meta.name``.
        A payload without ``meta.name`` is rejected.
        """
        try:
            graph = import_graph(path.read_text(encoding="utf-8"))
            target = name or graph.meta.name
            stored = self._store.save(target, graph)
        except (ArchlabError, ValueError, OSError) as exc:
            return self._failure("import", exc, path=str(path))
        return ServiceResult(
            ok=True,
            op="import",
            data={"name": target, "path": str(stored), **_summary(graph)},
        )
