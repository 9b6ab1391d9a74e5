# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic analysis for type descriptor graphs.

Checks structural correctness of the graph before synthesis: duplicate
names, type names reserved by primitive spellings, and unresolved
references. Unlike the synthesizer, which stops at the
first problem, analysis collects every error so they can be reported
together. Business checks such as reference cycles live in
:mod:`schemaforge.validation`.
"""

from __future__ import annotations

from dataclasses import dataclass

from schemaforge.compiler.primitives import primitive_kind
from schemaforge.model.entities import StructDescriptor, TypeGraph, UnionDescriptor
from schemaforge.model.types import TypeRef, named_refs

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SemanticError:
    """A structural error detected during semantic analysis.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


def analyze(graph: TypeGraph) -> list[SemanticError]:
    """Perform semantic analysis on a type descriptor graph.

    Checks performed:
    - Duplicate type names across the graph.
    - Type names spelled like a primitive (``Double``, ``str``, ...), which a
      descriptor file would read as the primitive and never as the type.
    - Duplicate field names within each struct.
    - Duplicate case names within each union.
    - Duplicate parameter keys within each union case (an explicit label
      such as ``_0`` may collide with a positional key).
    - Named type references in fields and parameters must resolve to a
      struct or union declared in the graph.

    Returns:
        A list of :class:`SemanticError` instances. An empty list means no
        semantic errors were found.
    """
    errors: list[SemanticError] = []
    declared = set(graph.names())

    errors.extend(_check_duplicate_names(graph.names(), "Duplicate type name '{}'"))
    errors.extend(_check_primitive_names(graph.names()))

    for decl in graph.types:
        if isinstance(decl, StructDescriptor):
            errors.extend(_check_struct(decl, declared))
        elif isinstance(decl, UnionDescriptor):
            errors.extend(_check_union(decl, declared))

    return errors


# ################
# Implementation
# ################


def _check_duplicate_names(names: list[str], template: str) -> list[SemanticError]:
    """Report each name that appears more than once, once per extra occurrence."""
    seen: set[str] = set()
    errors: list[SemanticError] = []
    for name in names:
        if name in seen:
            errors.append(SemanticError(message=template.format(name)))
        seen.add(name)
    return errors


def _check_primitive_names(names: list[str]) -> list[SemanticError]:
    errors: list[SemanticError] = []
    for name in names:
        kind = primitive_kind(name)
        if kind is not None:
            errors.append(
                SemanticError(message=f"Type name '{name}' is reserved for the primitive type '{kind.value}'")
            )
    return errors


def _check_refs(ctx: str, type_ref: TypeRef, declared: set[str]) -> list[SemanticError]:
    return [
        SemanticError(message=f"Unresolved type reference '{name}' in {ctx}")
        for name in named_refs(type_ref)
        if name not in declared
    ]


def _check_struct(struct: StructDescriptor, declared: set[str]) -> list[SemanticError]:
    errors = _check_duplicate_names(
        [f.name for f in struct.fields],
        "Duplicate field name '{}' in struct '" + struct.name + "'",
    )
    for f in struct.fields:
        errors.extend(_check_refs(f"field '{struct.name}.{f.name}'", f.type, declared))
    return errors


def _check_union(union: UnionDescriptor, declared: set[str]) -> list[SemanticError]:
    errors = _check_duplicate_names(
        [c.name for c in union.cases],
        "Duplicate case name '{}' in union '" + union.name + "'",
    )
    for case in union.cases:
        keys = case.param_keys()
        errors.extend(
            _check_duplicate_names(keys, "Duplicate parameter key '{}' in case '" + f"{union.name}.{case.name}" + "'")
        )
        for key, param in zip(keys, case.params):
            errors.extend(_check_refs(f"parameter '{union.name}.{case.name}.{key}'", param.type, declared))
    return errors
