# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Business validation checks for type descriptor graphs.

These checks operate on graphs that passed semantic analysis and flag
declarations that are structurally valid but compile to a surprising or
unusable schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from schemaforge.model.entities import StructDescriptor, TypeGraph, UnionDescriptor
from schemaforge.model.types import NamedTypeRef, named_refs

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue: the graph compiles, but likely not as intended.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A fatal issue: the graph cannot be compiled.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running business validation checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that prevent synthesis.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(graph: TypeGraph) -> ValidationResult:
    """Run all business validation checks on a type descriptor graph.

    Checks performed:

    1. **Empty unions** (warning): a union without cases compiles to a string
       enum with no values, which no output can satisfy.

    2. **Mixed unions** (warning): a union mixing bare and payload cases
       compiles every case to an object branch; bare cases become objects
       with no properties instead of plain strings.

    3. **Shadowed descriptions** (warning): a description on a required
       field referencing a type that carries its own description is
       discarded, because the referenced type's description wins.

    4. **Type reference cycles** (error): a struct or union that reaches
       itself through field or parameter references cannot be expanded
       into a finite schema.

    Args:
        graph: The graph to validate. Semantic analysis should have passed.

    Returns:
        A :class:`ValidationResult` containing any warnings and errors found.
    """
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    warnings.extend(_check_empty_unions(graph))
    warnings.extend(_check_mixed_unions(graph))
    warnings.extend(_check_shadowed_descriptions(graph))
    errors.extend(_check_type_cycles(graph))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _detect_cycle(graph: dict[str, list[str]]) -> list[str] | None:
    """Detect a cycle in a directed graph using DFS.

    Uses a three-colour marking scheme (white/grey/black) to distinguish
    unvisited, in-progress, and fully-explored nodes.

    Args:
        graph: Adjacency list mapping each node to its direct neighbours.
            Nodes that appear only as neighbours (not as keys) are treated
            as having no outgoing edges.

    Returns:
        A list of node names forming the cycle with the start node repeated
        at the end (e.g. ``["A", "B", "A"]``), or ``None`` if the graph is
        acyclic.
    """
    WHITE, GREY, BLACK = 0, 1, 2
    color: dict[str, int] = {}
    path: list[str] = []

    def _dfs(node: str) -> list[str] | None:
        color[node] = GREY
        path.append(node)
        for neighbor in graph.get(node, []):
            state = color.get(neighbor, WHITE)
            if state == GREY:
                cycle_start = path.index(neighbor)
                return path[cycle_start:] + [neighbor]
            if state == WHITE:
                result = _dfs(neighbor)
                if result is not None:
                    return result
        path.pop()
        color[node] = BLACK
        return None

    for node in graph:
        if color.get(node, WHITE) == WHITE:
            result = _dfs(node)
            if result is not None:
                return result
    return None


def _check_empty_unions(graph: TypeGraph) -> list[ValidationWarning]:
    return [
        ValidationWarning(message=f"Union '{decl.name}' has no cases; its enum admits no value.")
        for decl in graph.types
        if isinstance(decl, UnionDescriptor) and not decl.cases
    ]


def _check_mixed_unions(graph: TypeGraph) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    for decl in graph.types:
        if not isinstance(decl, UnionDescriptor) or decl.is_simple:
            continue
        bare = [c.name for c in decl.cases if c.is_bare]
        if bare:
            warnings.append(
                ValidationWarning(
                    message=(
                        f"Union '{decl.name}' mixes bare and payload cases; "
                        f"bare cases compile to empty objects: {', '.join(bare)}."
                    )
                )
            )
    return warnings


def _has_root_description(decl: StructDescriptor | UnionDescriptor | None) -> bool:
    """True when the compiled inner schema of *decl* carries a root description.

    Associated unions repeat their description inside each branch, so their
    ``anyOf`` root has none.
    """
    if decl is None or decl.description is None:
        return False
    return isinstance(decl, StructDescriptor) or decl.is_simple


def _check_shadowed_descriptions(graph: TypeGraph) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    for decl in graph.types:
        if not isinstance(decl, StructDescriptor):
            continue
        for f in decl.fields:
            if f.description is None or f.optional or not isinstance(f.type, NamedTypeRef):
                continue
            if _has_root_description(graph.get(f.type.name)):
                warnings.append(
                    ValidationWarning(
                        message=(
                            f"Description of field '{decl.name}.{f.name}' is discarded: "
                            f"type '{f.type.name}' has its own description."
                        )
                    )
                )
    return warnings


def _check_type_cycles(graph: TypeGraph) -> list[ValidationError]:
    """Return an error for a reference cycle between declared types."""
    declared = set(graph.names())
    edges: dict[str, list[str]] = {}
    for decl in graph.types:
        refs: list[str] = []
        if isinstance(decl, StructDescriptor):
            for f in decl.fields:
                refs.extend(named_refs(f.type))
        else:
            for case in decl.cases:
                for param in case.params:
                    refs.extend(named_refs(param.type))
        edges.setdefault(decl.name, []).extend(r for r in refs if r in declared)

    cycle = _detect_cycle(edges)
    if cycle is None:
        return []
    return [ValidationError(message=f"Recursive type reference cycle detected: {' -> '.join(cycle)}.")]
