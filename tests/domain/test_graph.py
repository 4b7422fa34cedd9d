"""Tests for the DomainGraph model and whole-collection replacement."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from archlab.domain.errors import DuplicateNodeError, NodeNotFoundError
from archlab.domain.graph import (
    DomainGraph,
    Entity,
    PrimitiveField,
    ValueObject,
    ValueObjectField,
)
from archlab.domain.ids import CounterIds
from archlab.domain.types import NodeKind, Primitive
from tests.conftest import make_graph


class TestParsing:
    def test_camel_case_wire_names(self, starter: DomainGraph) -> None:
        assert starter.aggregates[0].root_entity_id == "entity-1"
        assert starter.use_cases[0].repo_ids == ("repo-1",)
        assert starter.entities[0].id_type is Primitive.GUID

    def test_entity_fields_are_tagged(self) -> None:
        graph = make_graph(
            entities=[
                {
                    "id": "e-1",
                    "name": "Ride",
                    "idType": "guid",
                    "fields": [
                        {"kind": "primitive", "name": "Status", "type": "string"},
                        {"kind": "vo", "name": "Fare", "voId": "vo-1"},
                    ],
                }
            ]
        )
        primitive, vo = graph.entities[0].fields
        assert isinstance(primitive, PrimitiveField)
        assert isinstance(vo, ValueObjectField)
        assert vo.vo_id == "vo-1"

    def test_unknown_field_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_graph(
                entities=[
                    {
                        "id": "e-1",
                        "name": "E",
                        "idType": "int",
                        "fields": [{"kind": "x", "name": "a"}],
                    }
                ]
            )

    def test_legacy_primitive_spelling(self) -> None:
        graph = make_graph(
            valueObjects=[
                {"id": "v", "name": "At", "fields": [{"name": "When", "type": "DateTime"}]}
            ]
        )
        assert graph.value_objects[0].fields[0].type is Primitive.DATETIME

    def test_unknown_primitive_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_graph(
                valueObjects=[{"id": "v", "name": "X", "fields": [{"name": "a", "type": "float"}]}]
            )

    def test_frozen(self, starter: DomainGraph) -> None:
        with pytest.raises(ValidationError):
            starter.meta = starter.meta.model_copy(update={"name": "x"})  # type: ignore[misc]
        assert isinstance(starter.entities, tuple)


class TestLookups:
    def test_find(self, starter: DomainGraph) -> None:
        node = starter.find(NodeKind.ENTITY, "entity-1")
        assert isinstance(node, Entity)
        assert node.name == "Ride"

    def test_find_wrong_collection(self, starter: DomainGraph) -> None:
        assert starter.find(NodeKind.VALUE_OBJECT, "entity-1") is None

    def test_node_ids(self, starter: DomainGraph) -> None:
        assert starter.node_ids() == {"vo-1", "entity-1", "agg-1", "repo-1", "uc-1"}

    def test_collection_accepts_wire_name(self, starter: DomainGraph) -> None:
        assert starter.collection("useCases") == starter.use_cases  # type: ignore[arg-type]


class TestAdd:
    def test_assigns_id_from_generator(self) -> None:
        ids = CounterIds()
        graph = DomainGraph.empty("Shop")
        graph = graph.add(
            NodeKind.VALUE_OBJECT,
            {"name": "Money", "fields": [{"name": "Amount", "type": "decimal"}]},
            ids=ids,
        )
        graph = graph.add(NodeKind.ENTITY, {"name": "Order", "idType": "guid"}, ids=ids)
        assert [vo.id for vo in graph.value_objects] == ["node-1"]
        assert [e.id for e in graph.entities] == ["node-2"]

    def test_returns_new_graph(self) -> None:
        original = DomainGraph.empty()
        updated = original.add(NodeKind.REPOSITORY, {"id": "r-1", "name": "IRepo"})
        assert original.repositories == ()
        assert len(updated.repositories) == 1

    def test_accepts_model_instance(self) -> None:
        vo = ValueObject(id="vo-9", name="Email")
        graph = DomainGraph.empty().add(NodeKind.VALUE_OBJECT, vo)
        assert graph.value_objects == (vo,)

    def test_rejects_model_of_other_kind(self) -> None:
        entity = Entity.model_validate(
            {
                "id": "e-9",
                "name": "Order",
                "fields": [{"kind": "primitive", "name": "Total", "type": "decimal"}],
            }
        )
        with pytest.raises(TypeError, match="Cannot add a Entity to valueObjects"):
            DomainGraph.empty().add(NodeKind.VALUE_OBJECT, entity)

    def test_preserves_insertion_order(self) -> None:
        graph = DomainGraph.empty()
        for name in ("B", "A", "C"):
            graph = graph.add(NodeKind.VALUE_OBJECT, {"id": name, "name": name})
        assert [vo.name for vo in graph.value_objects] == ["B", "A", "C"]

    def test_duplicate_id_rejected_across_collections(self, starter: DomainGraph) -> None:
        with pytest.raises(DuplicateNodeError):
            starter.add(NodeKind.VALUE_OBJECT, {"id": "entity-1", "name": "Clash"})

    def test_missing_id_without_generator(self) -> None:
        with pytest.raises(ValueError, match="id generator"):
            DomainGraph.empty().add(NodeKind.VALUE_OBJECT, {"name": "Money"})


class TestUpdate:
    def test_applies_changes(self, starter: DomainGraph) -> None:
        updated = starter.update(NodeKind.AGGREGATE, "agg-1", invariants=["A", "B"])
        assert updated.aggregates[0].invariants == ("A", "B")
        assert starter.aggregates[0].invariants == (
            "Cannot complete ride without driver assigned",
        )

    def test_revalidates(self, starter: DomainGraph) -> None:
        with pytest.raises(ValidationError):
            starter.update(NodeKind.ENTITY, "entity-1", id_type="float")

    def test_keeps_position(self) -> None:
        graph = make_graph(
            valueObjects=[
                {"id": "a", "name": "A"},
                {"id": "b", "name": "B"},
                {"id": "c", "name": "C"},
            ]
        )
        updated = graph.update(NodeKind.VALUE_OBJECT, "b", name="Beta")
        assert [vo.name for vo in updated.value_objects] == ["A", "Beta", "C"]

    def test_id_is_permanent(self, starter: DomainGraph) -> None:
        with pytest.raises(ValueError, match="permanent"):
            starter.update(NodeKind.ENTITY, "entity-1", id="entity-2")

    def test_unknown_id(self, starter: DomainGraph) -> None:
        with pytest.raises(NodeNotFoundError):
            starter.update(NodeKind.ENTITY, "missing", name="X")


class TestDelete:
    def test_removes_node(self, starter: DomainGraph) -> None:
        updated = starter.delete(NodeKind.REPOSITORY, "repo-1")
        assert updated.repositories == ()
        assert len(starter.repositories) == 1

    def test_leaves_dangling_references(self, starter: DomainGraph) -> None:
        updated = starter.delete(NodeKind.REPOSITORY, "repo-1")
        assert updated.use_cases[0].repo_ids == ("repo-1",)

    def test_unknown_id(self, starter: DomainGraph) -> None:
        with pytest.raises(NodeNotFoundError):
            starter.delete(NodeKind.USE_CASE, "nope")


def test_rename(starter: DomainGraph) -> None:
    renamed = starter.rename("Rides")
    assert renamed.meta.name == "Rides"
    assert renamed.meta.version == starter.meta.version
    assert starter.meta.name == "Ride Sharing Domain"
