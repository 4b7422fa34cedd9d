"""Domain graph model: the five building-block collections plus metadata.

Attributes are snake_case in Python and camelCase on the wire
(``valueObjects``, ``idType``, ``voId``, ``rootEntityId`` ...), so a
snapshot written by the editor loads unchanged and exports identically.

INVARIANT: Graph values are frozen. Collections are tuples, and
:meth:`DomainGraph.add`, :meth:`DomainGraph.update` and
:meth:`DomainGraph.delete` return a new graph with the affected collection
replaced wholesale. A graph can therefore be shared between the validator,
the emitter and a store without copying.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from archlab.domain.errors import DuplicateNodeError, NodeNotFoundError
from archlab.domain.types import NodeKind, Primitive

if TYPE_CHECKING:
    from archlab.domain.ids import IdGenerator


def _coerce_primitive(value: Any) -> Any:
    return Primitive(value) if isinstance(value, str) else value


# Accepts any casing of a primitive name ("Guid", "DateTime") on input.
PrimitiveType = Annotated[Primitive, BeforeValidator(_coerce_primitive)]


class GraphModel(BaseModel):
    """Shared config: frozen, camelCase aliases, accepts either spelling."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------


class TypedField(GraphModel):
    """A named primitive field (value objects and use-case IO shapes)."""

    name: str
    type: PrimitiveType


class PrimitiveField(GraphModel):
    """Entity field holding a primitive value."""

    kind: Literal["primitive"] = "primitive"
    name: str
    type: PrimitiveType


class ValueObjectField(GraphModel):
    """Entity field holding a value object, referenced by id."""

    kind: Literal["vo"] = "vo"
    name: str
    vo_id: str


EntityField = Annotated[PrimitiveField | ValueObjectField, Field(discriminator="kind")]


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


class ValueObject(GraphModel):
    id: str
    name: str
    fields: tuple[TypedField, ...] = ()


class Entity(GraphModel):
    id: str
    name: str
    id_type: PrimitiveType = Primitive.GUID
    fields: tuple[EntityField, ...] = ()


class Aggregate(GraphModel):
    """Consistency boundary: one root entity, member entities, free-text rules."""

    id: str
    name: str
    root_entity_id: str
    entity_ids: tuple[str, ...] = ()
    invariants: tuple[str, ...] = ()


class RepositoryMethod(GraphModel):
    name: str
    signature: str


class Repository(GraphModel):
    id: str
    name: str
    methods: tuple[RepositoryMethod, ...] = ()


class IOShape(GraphModel):
    """Input or output record of a use case."""

    name: str
    fields: tuple[TypedField, ...] = ()


class UseCase(GraphModel):
    id: str
    name: str
    input: IOShape
    output: IOShape
    repo_ids: tuple[str, ...] = ()
    reads: tuple[str, ...] = ()
    writes: tuple[str, ...] = ()


GraphNode = ValueObject | Entity | Aggregate | Repository | UseCase


class GraphMeta(GraphModel):
    name: str
    version: int = 1


# kind -> (attribute name, node class)
_COLLECTIONS: dict[NodeKind, tuple[str, type[GraphModel]]] = {
    NodeKind.VALUE_OBJECT: ("value_objects", ValueObject),
    NodeKind.ENTITY: ("entities", Entity),
    NodeKind.AGGREGATE: ("aggregates", Aggregate),
    NodeKind.REPOSITORY: ("repositories", Repository),
    NodeKind.USE_CASE: ("use_cases", UseCase),
}


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------


class DomainGraph(GraphModel):
    """A complete domain design: five ordered collections plus ``meta``."""

    value_objects: tuple[ValueObject, ...] = ()
    entities: tuple[Entity, ...] = ()
    aggregates: tuple[Aggregate, ...] = ()
    repositories: tuple[Repository, ...] = ()
    use_cases: tuple[UseCase, ...] = ()
    meta: GraphMeta

    @classmethod
    def empty(cls, name: str = "Untitled Project", *, version: int = 1) -> DomainGraph:
        return cls(meta=GraphMeta(name=name, version=version))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def collection(self, kind: NodeKind) -> tuple[GraphNode, ...]:
        """Return the collection for *kind*, in insertion order."""
        attr, _cls = _COLLECTIONS[NodeKind(kind)]
        return getattr(self, attr)

    def find(self, kind: NodeKind, node_id: str) -> GraphNode | None:
        """Return the node with *node_id* in the *kind* collection, or None."""
        for node in self.collection(kind):
            if node.id == node_id:
                return node
        return None

    def node_ids(self) -> set[str]:
        """All ids across every collection."""
        return {node.id for kind in NodeKind for node in self.collection(kind)}

    # ------------------------------------------------------------------
    # Whole-collection replacement
    # ------------------------------------------------------------------

    def add(
        self,
        kind: NodeKind,
        node: GraphNode | Mapping[str, Any],
        *,
        ids: IdGenerator | None = None,
    ) -> DomainGraph:
        """Return a new graph with *node* appended to the *kind* collection.

        *node* may be a model instance or a mapping of attributes. A mapping
        without an ``id`` gets one from *ids*.

        Raises:
            DuplicateNodeError: The id is already used anywhere in the graph.
            ValueError: A mapping has no id and no generator was given.
            TypeError: *node* is a model of another kind.
        """
        kind = NodeKind(kind)
        attr, node_cls = _COLLECTIONS[kind]
        if isinstance(node, BaseModel):
            if not isinstance(node, node_cls):
                msg = f"Cannot add a {type(node).__name__} to {kind.value}"
                raise TypeError(msg)
            new_node = node
        else:
            data = dict(node)
            if "id" not in data:
                if ids is None:
                    msg = f"Cannot add to {kind.value} without an id or an id generator"
                    raise ValueError(msg)
                data["id"] = ids.next_id()
            new_node = node_cls.model_validate(data)

        if new_node.id in self.node_ids():
            msg = f"Node id already in use: {new_node.id!r}"
            raise DuplicateNodeError(msg)
        return self.model_copy(update={attr: (*getattr(self, attr), new_node)})

    def update(self, kind: NodeKind, node_id: str, **changes: Any) -> DomainGraph:
        """Return a new graph where the *kind* node *node_id* has *changes* applied.

        *changes* use the Python attribute names (``root_entity_id``, not
        ``rootEntityId``). The id itself cannot change.
        """
        kind = NodeKind(kind)
        if "id" in changes:
            msg = "Node ids are permanent and cannot be updated"
            raise ValueError(msg)
        attr, node_cls = _COLLECTIONS[kind]
        current = self.find(kind, node_id)
        if current is None:
            msg = f"No {kind.value} node with id {node_id!r}"
            raise NodeNotFoundError(msg)

        replacement = node_cls.model_validate({**current.model_dump(), **changes})
        replaced = tuple(replacement if n.id == node_id else n for n in getattr(self, attr))
        return self.model_copy(update={attr: replaced})

    def delete(self, kind: NodeKind, node_id: str) -> DomainGraph:
        """Return a new graph without the *kind* node *node_id*.

        References to the removed node elsewhere are left in place; they
        surface as validator findings.
        """
        kind = NodeKind(kind)
        if self.find(kind, node_id) is None:
            msg = f"No {kind.value} node with id {node_id!r}"
            raise NodeNotFoundError(msg)
        attr, _cls = _COLLECTIONS[kind]
        remaining = tuple(n for n in getattr(self, attr) if n.id != node_id)
        return self.model_copy(update={attr: remaining})

    def rename(self, name: str) -> DomainGraph:
        """Return a new graph with ``meta.name`` replaced."""
        return self.model_copy(update={"meta": self.meta.model_copy(update={"name": name})})
