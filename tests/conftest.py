"""Shared pytest fixtures and test helpers for archlab tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from archlab.domain.graph import DomainGraph
from archlab.domain.snapshot import export_graph
from archlab.domain.starter import starter_graph
from archlab.infrastructure.workspace import Workspace


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def starter() -> DomainGraph:
    """The ride-sharing starter graph."""
    return starter_graph()


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """Workspace with an empty project store under a temp directory."""
    return Workspace(tmp_path / "projects")


@pytest.fixture
def snapshot_file(tmp_path: Path, starter: DomainGraph) -> Path:
    """The starter graph exported to a JSON file."""
    path = tmp_path / "starter.json"
    path.write_text(export_graph(starter), encoding="utf-8")
    return path


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated store.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.delenv("ARCHLAB_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_graph(name: str = "Test", **collections: list[dict[str, Any]]) -> DomainGraph:
    """Build a graph from camelCase snapshot collections.

    Example: ``make_graph(valueObjects=[...], useCases=[...])``.
    """
    return DomainGraph.model_validate({**collections, "meta": {"name": name, "version": 1}})


def use_case(uc_id: str, **overrides: Any) -> dict[str, Any]:
    """Snapshot dict for a use case with empty IO shapes."""
    data: dict[str, Any] = {
        "id": uc_id,
        "name": "RequestRide",
        "input": {"name": "Request", "fields": []},
        "output": {"name": "Response", "fields": []},
        "repoIds": [],
        "reads": [],
        "writes": [],
    }
    data.update(overrides)
    return data
