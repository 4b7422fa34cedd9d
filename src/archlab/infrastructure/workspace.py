"""Workspace: the project store and template overrides behind the services.

Services receive a Workspace at construction time, the way they would a
database handle: everything that touches disk goes through it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from archlab.domain.emitter import load_environment
from archlab.domain.errors import ProjectNotFoundError
from archlab.domain.snapshot import import_graph
from archlab.infrastructure.store import ProjectStore

if TYPE_CHECKING:
    from jinja2 import Environment

    from archlab.config.settings import ArchSettings
    from archlab.domain.graph import DomainGraph


class Workspace:
    """A project store plus an optional template override directory."""

    def __init__(self, store_root: Path, *, template_dir: Path | None = None) -> None:
        self.store = ProjectStore(store_root)
        self.template_dir = template_dir
        self._environment: Environment | None = None

    @classmethod
    def from_settings(cls, settings: ArchSettings) -> Workspace:
        return cls(settings.store_path, template_dir=settings.template_dir)

    @property
    def environment(self) -> Environment:
        """Template environment (built lazily, overrides first)."""
        if self._environment is None:
            self._environment = load_environment(self.template_dir)
        return self._environment

    def read_graph(self, source: str) -> DomainGraph:
        """Load a graph from a snapshot file path or a stored project name.

        An existing file wins over a project of the same name.

        Raises:
            GraphImportError: The snapshot is malformed.
            ProjectNotFoundError: *source* is neither a file nor a stored project.
        """
        path = Path(source)
        if path.is_file():
            return import_graph(path.read_text(encoding="utf-8"))
        try:
            known = self.store.exists(source)
        except ValueError:
            known = False
        graph = self.store.load(source) if known else None
        if graph is None:
            msg = f"No snapshot file or stored project named {source!r}"
            raise ProjectNotFoundError(msg)
        return graph
