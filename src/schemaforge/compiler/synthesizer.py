# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Synthesis of structured-output schemas from a type descriptor graph.

Structs compile to closed objects. Unions compile to a string enum when no
case carries parameters, and otherwise to an ``anyOf`` with one single-key
object branch per case. Referenced types are resolved through a
:class:`~schemaforge.compiler.registry.ReferenceRegistry`, so each type is
compiled once per run no matter how often it is referenced.

Description placement is deliberately uneven:

* A struct or simple-union description sits on the schema root.
* An associated-union description is repeated on every branch's inner case
  object; the ``anyOf`` root carries none.
* A description on a required slot referencing a custom type is merged into
  the referenced schema only when that schema has no description of its own.
"""

from __future__ import annotations

from typing import Any

from schemaforge.compiler.errors import DuplicateMemberNameError, UnsupportedDeclarationKindError
from schemaforge.compiler.primitives import type_tag
from schemaforge.compiler.registry import Declaration, ReferenceRegistry
from schemaforge.model.entities import CaseDescriptor, StructDescriptor, TypeGraph, UnionDescriptor
from schemaforge.model.types import ArrayTypeRef, ElementTypeRef, NamedTypeRef, PrimitiveTypeRef, TypeRef
from schemaforge.schema.envelope import wrap
from schemaforge.schema.fragments import (
    AnyOfSchema,
    ArraySchema,
    NullSchema,
    ObjectSchema,
    ScalarSchema,
    SchemaFragment,
    StringEnumSchema,
    merge_description,
)

# ###############
# Public Interface
# ###############


class SchemaSynthesizer:
    """Compiles the declarations of one graph into enveloped schema documents.

    The synthesizer owns the registry for its graph; compiling several roots
    with the same instance reuses every fragment already computed. It is safe
    to call :meth:`compile` from multiple threads.

    Raises:
        DuplicateTypeNameError: If two declarations in *graph* share a name.
    """

    def __init__(self, graph: TypeGraph) -> None:
        self._graph = graph
        self._registry = ReferenceRegistry(graph, self._compile_declaration)

    @property
    def registry(self) -> ReferenceRegistry:
        return self._registry

    def inner_schema(self, name: str) -> SchemaFragment:
        """Return the inner schema fragment for the type *name*."""
        return self._registry.resolve(name)

    def compile(self, name: str) -> dict[str, Any]:
        """Return the enveloped schema document for the type *name*.

        Raises:
            SchemaError: If *name* or anything it references is invalid.
        """
        return wrap(name, self.inner_schema(name))

    def compile_all(self) -> dict[str, dict[str, Any]]:
        """Compile every declared type, keyed by name in declaration order."""
        return {name: self.compile(name) for name in self._graph.names()}

    def _compile_declaration(self, decl: Declaration) -> SchemaFragment:
        if isinstance(decl, StructDescriptor):
            return compile_struct(decl, self._registry)
        if isinstance(decl, UnionDescriptor):
            return compile_union(decl, self._registry)
        raise UnsupportedDeclarationKindError(type(decl).__name__, type_name=getattr(decl, "name", None))


def synthesize(graph: TypeGraph, name: str) -> dict[str, Any]:
    """Compile a single root type of *graph* into its enveloped schema document."""
    return SchemaSynthesizer(graph).compile(name)


def synthesize_all(graph: TypeGraph) -> dict[str, dict[str, Any]]:
    """Compile every type of *graph* into enveloped schema documents."""
    return SchemaSynthesizer(graph).compile_all()


def build_slot_schema(
    slot_type: TypeRef,
    registry: ReferenceRegistry,
    *,
    optional: bool = False,
    description: str | None = None,
    owner: str | None = None,
    slot: str | None = None,
) -> SchemaFragment:
    """Compile one struct field or case parameter into a schema fragment.

    Args:
        slot_type: The declared type of the slot.
        registry: Resolves custom type names to their inner schemas.
        optional: Whether the slot accepts null.
        description: Slot-level description, if any.
        owner: Name of the declaring type (error context).
        slot: Name of the field or parameter key (error context).

    Returns:
        The fragment for the slot. For a required custom-type slot without a
        description this is the referenced inner schema itself.
    """
    if isinstance(slot_type, ArrayTypeRef):
        items = _element_schema(slot_type.element_type, registry, owner, slot)
        return ArraySchema(items=items, nullable=optional, description=description)

    if isinstance(slot_type, PrimitiveTypeRef):
        return ScalarSchema(type=type_tag(slot_type.primitive), nullable=optional, description=description)

    # NamedTypeRef is the only remaining variant.
    assert isinstance(slot_type, NamedTypeRef)
    referenced = registry.resolve(slot_type.name, referrer=owner, slot=slot)
    if optional:
        return AnyOfSchema(branches=(referenced, NullSchema()), description=description)
    return merge_description(referenced, description)


def compile_struct(struct: StructDescriptor, registry: ReferenceRegistry) -> ObjectSchema:
    """Compile a struct into a closed object schema.

    Every field is listed in ``required``; optional fields are expressed
    through a nullable fragment instead.

    Raises:
        DuplicateMemberNameError: If two fields share a name.
    """
    _check_unique([f.name for f in struct.fields], struct.name, "field")
    properties = tuple(
        (
            f.name,
            build_slot_schema(
                f.type,
                registry,
                optional=f.optional,
                description=f.description,
                owner=struct.name,
                slot=f.name,
            ),
        )
        for f in struct.fields
    )
    return ObjectSchema(properties=properties, description=struct.description)


def compile_union(union: UnionDescriptor, registry: ReferenceRegistry) -> StringEnumSchema | AnyOfSchema:
    """Compile a tagged union into a string enum or an ``anyOf`` of case objects.

    Raises:
        DuplicateMemberNameError: If two cases, or two parameters of one case,
            share a name.
    """
    _check_unique([c.name for c in union.cases], union.name, "case")
    if union.is_simple:
        return StringEnumSchema(values=tuple(c.name for c in union.cases), description=union.description)
    branches = tuple(_case_branch(union, case, registry) for case in union.cases)
    return AnyOfSchema(branches=branches)


# ################
# Implementation
# ################


def _element_schema(
    element: ElementTypeRef,
    registry: ReferenceRegistry,
    owner: str | None,
    slot: str | None,
) -> SchemaFragment:
    """Return the ``items`` fragment for an array element type."""
    if isinstance(element, PrimitiveTypeRef):
        return ScalarSchema(type=type_tag(element.primitive))
    return registry.resolve(element.name, referrer=owner, slot=slot)


def _case_branch(union: UnionDescriptor, case: CaseDescriptor, registry: ReferenceRegistry) -> ObjectSchema:
    """Build the single-key object branch for one case of an associated union.

    A bare case gets an inner object with no properties.
    """
    keys = case.param_keys()
    _check_unique(keys, f"{union.name}.{case.name}", "parameter")
    owner = f"{union.name}.{case.name}"
    params = tuple(
        (key, build_slot_schema(param.type, registry, optional=param.optional, owner=owner, slot=key))
        for key, param in zip(keys, case.params)
    )
    inner = ObjectSchema(properties=params, description=union.description)
    return ObjectSchema(properties=((case.name, inner),))


def _check_unique(names: list[str], type_name: str, member_kind: str) -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise DuplicateMemberNameError(name, type_name=type_name, member_kind=member_kind)
        seen.add(name)
