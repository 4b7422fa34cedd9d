"""Code emitter: compile graph nodes into C# source files.

Each node kind has a small builder that turns the node into a flat
template context (lists of ready-made declarations, guards and
assignments) and a Jinja2 template that lays those out. The builders hold
the rules; the templates hold only layout, so a project can restyle the
output by overriding templates without changing what gets generated.

The emitter performs no validation. Unresolved references never fail:

- Entity fields pointing at a missing value object become a
  ``// Missing VO: <field>`` line and are left out of the constructor.
- An aggregate whose root cannot be resolved is emitted as a single
  ``// Missing root entity ...`` line.
- Use-case repository ids that do not resolve are skipped silently.

Output is deterministic: same graph, same text.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from archlab.domain.graph import (
    Aggregate,
    DomainGraph,
    Entity,
    PrimitiveField,
    Repository,
    TypedField,
    UseCase,
    ValueObject,
)
from archlab.domain.naming import SOURCE_EXTENSION, camel, csharp_type, interface_stem, pascal
from archlab.domain.types import Primitive
from archlab.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from jinja2 import Environment

TEMPLATE_GROUP = "csharp"

# Path prefix per collection, in emission order.
PATH_PREFIXES: dict[str, str] = {
    "value_objects": "/Domain/ValueObjects",
    "entities": "/Domain/Entities",
    "aggregates": "/Domain/Aggregates",
    "repositories": "/Application/Ports",
    "use_cases": "/Application/UseCases",
}


class GeneratedFile(BaseModel):
    """One emitted source file. ``path`` is rooted at ``/``."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str


@functools.cache
def _default_environment() -> Environment:
    return build_template_environment(TEMPLATE_GROUP)


def load_environment(override_dir: Path | None = None) -> Environment:
    """Return the template environment, honouring an optional override directory."""
    if override_dir is None:
        return _default_environment()
    return build_template_environment(TEMPLATE_GROUP, override_dir=override_dir)


def _render(env: Environment | None, template_name: str, **context: Any) -> str:
    template = (env or _default_environment()).get_template(template_name)
    return template.render(**context)


def _declarations(fields: Iterable[TypedField]) -> list[str]:
    """``Type Name`` pairs for record parameter lists."""
    return [f"{csharp_type(f.type)} {pascal(f.name)}" for f in fields]


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


def _guard(field: TypedField) -> str | None:
    """Synthesize a guard by field type; None when the type has no guard."""
    param = camel(field.name)
    label = pascal(field.name)
    if field.type == Primitive.DECIMAL:
        return f'if ({param} < 0) throw new ArgumentException("{label} cannot be negative");'
    if field.type == Primitive.STRING:
        return (
            f"if (string.IsNullOrWhiteSpace({param})) "
            f'throw new ArgumentException("{label} is required");'
        )
    return None


def emit_value_object(vo: ValueObject, *, env: Environment | None = None) -> str:
    """Immutable record struct with a guarded ``Create`` factory.

    Guards run in field declaration order, so the first failing field
    wins at runtime.
    """
    guards = [g for g in (_guard(f) for f in vo.fields) if g is not None]
    return _render(
        env,
        "value_object.cs.j2",
        name=vo.name,
        properties=_declarations(vo.fields),
        parameters=[f"{csharp_type(f.type)} {camel(f.name)}" for f in vo.fields],
        guards=guards,
        arguments=[camel(f.name) for f in vo.fields],
    )


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


def emit_entity(
    entity: Entity,
    value_objects: Sequence[ValueObject],
    *,
    env: Environment | None = None,
) -> str:
    """Class with a generated ``Id``, private-set properties and a positional constructor."""
    vo_names = {vo.id: vo.name for vo in value_objects}
    properties: list[str] = []
    parameters: list[str] = []
    assignments: list[str] = []

    for field in entity.fields:
        if isinstance(field, PrimitiveField):
            type_name: str | None = csharp_type(field.type)
        else:
            type_name = vo_names.get(field.vo_id)

        if type_name is None:
            properties.append(f"// Missing VO: {field.name}")
            continue
        properties.append(f"public {type_name} {pascal(field.name)} {{ get; private set; }}")
        parameters.append(f"{type_name} {camel(field.name)}")
        assignments.append(f"{pascal(field.name)} = {camel(field.name)};")

    id_initializer = "Guid.NewGuid()" if entity.id_type == Primitive.GUID else "default"
    return _render(
        env,
        "entity.cs.j2",
        name=entity.name,
        id_type=csharp_type(entity.id_type),
        id_initializer=id_initializer,
        properties=properties,
        parameters=parameters,
        assignments=assignments,
    )


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------


def emit_aggregate(
    aggregate: Aggregate,
    entities: Sequence[Entity],
    *,
    env: Environment | None = None,
) -> str:
    """Wrapper around the root entity with one placeholder block per invariant."""
    root = next((e for e in entities if e.id == aggregate.root_entity_id), None)
    if root is None:
        return _render(env, "aggregate_missing_root.cs.j2", name=aggregate.name)
    return _render(
        env,
        "aggregate.cs.j2",
        name=aggregate.name,
        root=root.name,
        invariants=list(aggregate.invariants),
    )


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------


def emit_repository(repository: Repository, *, env: Environment | None = None) -> str:
    """Interface listing each method signature verbatim."""
    return _render(
        env,
        "repository.cs.j2",
        name=repository.name,
        signatures=[m.signature for m in repository.methods],
    )


# ---------------------------------------------------------------------------
# Use cases
# ---------------------------------------------------------------------------


def emit_use_case(
    use_case: UseCase,
    repositories: Sequence[Repository],
    *,
    env: Environment | None = None,
) -> str:
    """Input/output records plus a class wired to its repository ports."""
    repos_by_id = {r.id: r for r in repositories}
    dependencies: list[dict[str, str]] = []
    for repo_id in use_case.repo_ids:
        repo = repos_by_id.get(repo_id)
        if repo is None:
            continue
        dependencies.append({"type": repo.name, "param": camel(interface_stem(repo.name))})

    return _render(
        env,
        "use_case.cs.j2",
        name=use_case.name,
        input_name=use_case.input.name,
        output_name=use_case.output.name,
        input_fields=_declarations(use_case.input.fields),
        output_fields=_declarations(use_case.output.fields),
        dependencies=dependencies,
        parameters=[f"{d['type']} {d['param']}" for d in dependencies],
    )


# ---------------------------------------------------------------------------
# Whole graph
# ---------------------------------------------------------------------------


def file_path(collection: str, name: str) -> str:
    """``/<Layer>/<Folder>/<Name>.cs``: the name is used verbatim."""
    return f"{PATH_PREFIXES[collection]}/{name}{SOURCE_EXTENSION}"


def generate_all_code(graph: DomainGraph, *, env: Environment | None = None) -> list[GeneratedFile]:
    """Emit every node of *graph*, collection by collection.

    Paths are not deduplicated: two nodes sharing a name in the same
    collection produce two files with the same path.
    """
    files: list[GeneratedFile] = []

    for vo in graph.value_objects:
        files.append(
            GeneratedFile(
                path=file_path("value_objects", vo.name),
                content=emit_value_object(vo, env=env),
            )
        )
    for entity in graph.entities:
        files.append(
            GeneratedFile(
                path=file_path("entities", entity.name),
                content=emit_entity(entity, graph.value_objects, env=env),
            )
        )
    for agg in graph.aggregates:
        files.append(
            GeneratedFile(
                path=file_path("aggregates", agg.name),
                content=emit_aggregate(agg, graph.entities, env=env),
            )
        )
    for repo in graph.repositories:
        files.append(
            GeneratedFile(
                path=file_path("repositories", repo.name),
                content=emit_repository(repo, env=env),
            )
        )
    for uc in graph.use_cases:
        files.append(
            GeneratedFile(
                path=file_path("use_cases", uc.name),
                content=emit_use_case(uc, graph.repositories, env=env),
            )
        )

    return files
