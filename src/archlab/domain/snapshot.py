"""Graph snapshot serialization: the JSON exchange format.

The snapshot is the camelCase JSON shape of :class:`DomainGraph`.
Field order and collection order survive a round trip, so
``import_graph(export_graph(g)) == g`` for any graph value.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from archlab.domain.errors import GraphImportError
from archlab.domain.graph import DomainGraph


def export_graph(graph: DomainGraph) -> str:
    """Serialize *graph* to pretty-printed snapshot JSON."""
    return graph.model_dump_json(by_alias=True, indent=2)


def graph_to_dict(graph: DomainGraph) -> dict[str, Any]:
    """Return the snapshot as plain JSON-compatible data."""
    return graph.model_dump(mode="json", by_alias=True)


def import_graph(text: str) -> DomainGraph:
    """Parse snapshot JSON into a :class:`DomainGraph`.

    Raises:
        GraphImportError: The text is not JSON, does not match the graph
            shape, or carries no ``meta.name``.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid graph JSON: {exc}"
        raise GraphImportError(msg) from exc
    return graph_from_dict(payload)


def graph_from_dict(payload: Any) -> DomainGraph:
    """Validate already-decoded snapshot data. See :func:`import_graph`."""
    if not isinstance(payload, dict):
        msg = "Invalid graph format: expected a JSON object"
        raise GraphImportError(msg)
    meta = payload.get("meta")
    if not isinstance(meta, dict) or not meta.get("name"):
        msg = "Invalid graph format: missing meta.name"
        raise GraphImportError(msg)
    try:
        return DomainGraph.model_validate(payload)
    except ValidationError as exc:
        msg = f"Invalid graph format: {exc.error_count()} validation error(s)\n{exc}"
        raise GraphImportError(msg) from exc
