"""Primitive kinds, node kinds, and finding severities."""

from __future__ import annotations

from enum import StrEnum


class Primitive(StrEnum):
    """Closed set of scalar field types a graph may use."""

    STRING = "string"
    INT = "int"
    DECIMAL = "decimal"
    GUID = "guid"
    DATETIME = "datetime"
    BOOL = "bool"

    @classmethod
    def _missing_(cls, value: object) -> Primitive | None:
        # Snapshots written by older editors spell these "Guid" / "DateTime".
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class NodeKind(StrEnum):
    """The five graph collections, in emission order."""

    VALUE_OBJECT = "valueObjects"
    ENTITY = "entities"
    AGGREGATE = "aggregates"
    REPOSITORY = "repositories"
    USE_CASE = "useCases"


class Severity(StrEnum):
    """Validator finding severity."""

    ERROR = "error"
    WARNING = "warning"


SEVERITY_RANK: dict[Severity, int] = {
    Severity.WARNING: 0,
    Severity.ERROR: 1,
}
