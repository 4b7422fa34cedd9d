"""Graph validator: referential integrity and modeling heuristics.

Five check groups run in a fixed order (aggregates, use cases, entities,
value objects, repositories) and every group runs regardless of what the
others found. Within a group, findings follow the collection order.

INVARIANT: ``validate`` is total. It never raises, never mutates the
graph, and reports dangling ids as findings rather than exceptions.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from archlab.domain.graph import DomainGraph, ValueObjectField
from archlab.domain.types import SEVERITY_RANK, Severity


class Finding(BaseModel):
    """One validator result, attached to the node it concerns."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    node_id: str
    message: str
    severity: Severity


def _error(node_id: str, message: str) -> Finding:
    return Finding(node_id=node_id, message=message, severity=Severity.ERROR)


def _warning(node_id: str, message: str) -> Finding:
    return Finding(node_id=node_id, message=message, severity=Severity.WARNING)


# ---------------------------------------------------------------------------
# Check groups
# ---------------------------------------------------------------------------


def _check_aggregates(graph: DomainGraph) -> Iterator[Finding]:
    entity_ids = {e.id for e in graph.entities}
    for agg in graph.aggregates:
        if agg.root_entity_id not in entity_ids:
            yield _error(agg.id, "Aggregate must have a valid root entity")
        for entity_id in agg.entity_ids:
            if entity_id not in entity_ids:
                yield _error(agg.id, f"Entity {entity_id} not found in aggregate")
        if not agg.invariants:
            yield _warning(agg.id, "Aggregate should define at least one invariant")


def _check_use_cases(graph: DomainGraph) -> Iterator[Finding]:
    repo_ids = {r.id for r in graph.repositories}
    targets = {e.id for e in graph.entities} | {a.id for a in graph.aggregates}
    for uc in graph.use_cases:
        for repo_id in uc.repo_ids:
            if repo_id not in repo_ids:
                yield _error(uc.id, f"Repository {repo_id} not found")
        for target_id in (*uc.reads, *uc.writes):
            if target_id not in targets:
                yield _error(uc.id, f"Target {target_id} not found")


def _check_entities(graph: DomainGraph) -> Iterator[Finding]:
    vo_ids = {v.id for v in graph.value_objects}
    for entity in graph.entities:
        for field in entity.fields:
            if isinstance(field, ValueObjectField) and field.vo_id not in vo_ids:
                yield _error(
                    entity.id,
                    f"Value Object {field.vo_id} not found for field {field.name}",
                )


def _check_value_objects(graph: DomainGraph) -> Iterator[Finding]:
    for vo in graph.value_objects:
        if not vo.fields:
            yield _warning(vo.id, "Value Object should have at least one field")


def _check_repositories(graph: DomainGraph) -> Iterator[Finding]:
    for repo in graph.repositories:
        if not repo.methods:
            yield _warning(repo.id, "Repository should define at least one method")


_CHECKS = (
    _check_aggregates,
    _check_use_cases,
    _check_entities,
    _check_value_objects,
    _check_repositories,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate(graph: DomainGraph) -> list[Finding]:
    """Return every finding for *graph*, in check order."""
    findings: list[Finding] = []
    for check in _CHECKS:
        findings.extend(check(graph))
    return findings


def filter_findings(
    findings: Iterable[Finding],
    min_severity: Severity | str = Severity.WARNING,
) -> list[Finding]:
    """Keep findings at or above *min_severity*, preserving order."""
    threshold = SEVERITY_RANK[Severity(min_severity)]
    return [f for f in findings if SEVERITY_RANK[f.severity] >= threshold]


def has_errors(findings: Iterable[Finding]) -> bool:
    return any(f.severity == Severity.ERROR for f in findings)
