"""Starter graph: a small ride-sharing domain to begin from."""

from __future__ import annotations

from typing import Any

from archlab.domain.graph import DomainGraph

STARTER_SNAPSHOT: dict[str, Any] = {
    "valueObjects": [
        {
            "id": "vo-1",
            "name": "Money",
            "fields": [
                {"name": "Amount", "type": "decimal"},
                {"name": "Currency", "type": "string"},
            ],
        },
    ],
    "entities": [
        {
            "id": "entity-1",
            "name": "Ride",
            "idType": "guid",
            "fields": [
                {"kind": "primitive", "name": "PassengerId", "type": "guid"},
                {"kind": "primitive", "name": "DriverId", "type": "guid"},
                {"kind": "primitive", "name": "Pickup", "type": "string"},
                {"kind": "primitive", "name": "Dropoff", "type": "string"},
                {"kind": "primitive", "name": "Status", "type": "string"},
            ],
        },
    ],
    "aggregates": [
        {
            "id": "agg-1",
            "name": "RideAggregate",
            "rootEntityId": "entity-1",
            "entityIds": ["entity-1"],
            "invariants": ["Cannot complete ride without driver assigned"],
        },
    ],
    "repositories": [
        {
            "id": "repo-1",
            "name": "IRideRepository",
            "methods": [
                {"name": "Save", "signature": "Task Save(Ride ride)"},
                {"name": "Get", "signature": "Task<Ride?> Get(Guid id)"},
            ],
        },
    ],
    "useCases": [
        {
            "id": "uc-1",
            "name": "RequestRideUseCase",
            "input": {"name": "Request", "fields": [{"name": "PassengerId", "type": "guid"}]},
            "output": {"name": "Response", "fields": [{"name": "RideId", "type": "guid"}]},
            "repoIds": ["repo-1"],
            "reads": [],
            "writes": ["entity-1"],
        },
    ],
    "meta": {"name": "Ride Sharing Domain", "version": 1},
}


def starter_graph(name: str | None = None) -> DomainGraph:
    """Return the ride-sharing starter graph, optionally renamed."""
    graph = DomainGraph.model_validate(STARTER_SNAPSHOT)
    return graph.rename(name) if name else graph
