# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptor files: a YAML front-end for the type descriptor graph.

A descriptor file lists struct and union declarations. Slot types are
written as type expressions using the usual source spellings:

* ``String``, ``Int``, ``Double``, ``Bool`` (and their aliases) for primitives,
* any other name for a struct or union declared in the graph,
* ``[T]`` for an array of ``T``,
* ``T?`` or ``Optional<T>`` for an optional field or parameter.

The format is versioned so future layout changes can be detected. JSON is a
subset of YAML, so JSON descriptor files load as well.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from schemaforge.compiler.errors import UnsupportedDeclarationKindError
from schemaforge.compiler.primitives import type_ref
from schemaforge.model.entities import (
    GRAPH_FORMAT_VERSION,
    CaseDescriptor,
    StructDescriptor,
    TypeGraph,
    UnionDescriptor,
)
from schemaforge.model.types import ArrayTypeRef, FieldDescriptor, ParamDescriptor, TypeRef

# ###############
# Public Interface
# ###############

class DescriptorError(Exception):
    """Raised when a descriptor file cannot be read or is malformed."""


def load_descriptors(path: Path) -> TypeGraph:
    """Load a descriptor file into a :class:`TypeGraph`.

    Raises:
        DescriptorError: If the file cannot be read or is malformed.
        UnsupportedDeclarationKindError: If a declaration has an unknown ``kind``.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DescriptorError(f"Descriptor file not found: {path}") from None
    except OSError as exc:
        raise DescriptorError(f"Cannot read descriptor file: {exc}") from exc
    return parse_descriptors(text, source_label=str(path))


def parse_descriptors(text: str, source_label: str = "<string>") -> TypeGraph:
    """Parse descriptor YAML text into a :class:`TypeGraph`.

    Args:
        text: Raw YAML (or JSON) content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        DescriptorError: If the content is malformed.
        UnsupportedDeclarationKindError: If a declaration has an unknown ``kind``.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DescriptorError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise DescriptorError(f"{source_label}: descriptor file must be a YAML mapping")

    version = data.get("version", GRAPH_FORMAT_VERSION)
    if str(version) != GRAPH_FORMAT_VERSION:
        raise DescriptorError(f"{source_label}: unsupported descriptor format version {version!r}")

    raw_types = data.get("types", [])
    if not isinstance(raw_types, list):
        raise DescriptorError(f"{source_label}: 'types' must be a list")

    types = [_parse_declaration(entry, f"{source_label}: types[{i}]") for i, entry in enumerate(raw_types)]
    return TypeGraph(types=types)


def parse_type_expression(text: str) -> tuple[TypeRef, bool]:
    """Parse a slot type expression into a type reference and an optional flag.

    Raises:
        DescriptorError: If the expression is empty, nests arrays, or marks an
            array element as optional.
    """
    expr = text.strip()
    optional = False
    if expr.endswith("?"):
        optional = True
        expr = expr[:-1].strip()
    elif expr.startswith("Optional<") and expr.endswith(">"):
        optional = True
        expr = expr[len("Optional<") : -1].strip()

    if expr.startswith("[") and expr.endswith("]"):
        element = expr[1:-1].strip()
        if element.startswith("[") or element.endswith("]"):
            raise DescriptorError(f"Nested arrays are not supported: '{text}'")
        if element.endswith("?") or element.startswith("Optional<"):
            raise DescriptorError(f"Array elements cannot be optional: '{text}'")
        return ArrayTypeRef(element_type=_type_name_ref(element, text)), optional

    return _type_name_ref(expr, text), optional


def merge_graphs(graphs: list[TypeGraph]) -> TypeGraph:
    """Concatenate the declarations of several graphs, preserving order.

    Name clashes are kept as-is so that semantic analysis can report them.
    """
    return TypeGraph(types=[decl for graph in graphs for decl in graph.types])


# ################
# Implementation
# ################


def _type_name_ref(name: str, expression: str) -> TypeRef:
    if not name or any(ch in name for ch in "[]?<> \t"):
        raise DescriptorError(f"Invalid type expression: '{expression}'")
    return type_ref(name)


def _require_string(mapping: dict[str, object], key: str, location: str) -> str:
    """Extract a required string field from a mapping, raising DescriptorError if missing."""
    if key not in mapping:
        raise DescriptorError(f"{location}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise DescriptorError(f"{location}: '{key}' must be a string")
    return value


def _type_expression(mapping: dict[str, object], location: str) -> str:
    """Return the 'type' entry as a type expression.

    An unquoted ``[T]`` reads as a one-element YAML list and is accepted as an array.
    """
    value = mapping.get("type")
    if isinstance(value, list) and len(value) == 1 and isinstance(value[0], str):
        return f"[{value[0]}]"
    return _require_string(mapping, "type", location)


def _optional_string(mapping: dict[str, object], key: str, location: str) -> str | None:
    value = mapping.get(key)
    if value is not None and not isinstance(value, str):
        raise DescriptorError(f"{location}: '{key}' must be a string")
    return value


def _optional_flag(mapping: dict[str, object], location: str) -> bool:
    value = mapping.get("optional", False)
    if not isinstance(value, bool):
        raise DescriptorError(f"{location}: 'optional' must be a boolean")
    return value


def _list_of(mapping: dict[str, object], key: str, location: str) -> list[object]:
    value = mapping.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise DescriptorError(f"{location}: '{key}' must be a list")
    return value


def _parse_declaration(entry: object, location: str) -> StructDescriptor | UnionDescriptor:
    """Parse a single entry of the ``types`` list."""
    if not isinstance(entry, dict):
        raise DescriptorError(f"{location} must be a YAML mapping")

    name = _require_string(entry, "name", location)
    location = f"{location} '{name}'"
    description = _optional_string(entry, "description", location)
    kind = entry.get("kind")

    if kind == "struct":
        fields = [
            _parse_field(f, f"{location}: fields[{i}]") for i, f in enumerate(_list_of(entry, "fields", location))
        ]
        return StructDescriptor(name=name, fields=fields, description=description)

    if kind == "union":
        cases = [_parse_case(c, f"{location}: cases[{i}]") for i, c in enumerate(_list_of(entry, "cases", location))]
        return UnionDescriptor(name=name, cases=cases, description=description)

    raise UnsupportedDeclarationKindError(kind, type_name=name)


def _parse_field(entry: object, location: str) -> FieldDescriptor:
    if not isinstance(entry, dict):
        raise DescriptorError(f"{location} must be a YAML mapping")

    name = _require_string(entry, "name", location)
    expression = _type_expression(entry, location)
    flag = _optional_flag(entry, location)
    try:
        slot_type, optional = parse_type_expression(expression)
    except DescriptorError as exc:
        raise DescriptorError(f"{location}: {exc}") from exc

    return FieldDescriptor(
        name=name,
        type=slot_type,
        optional=optional or flag,
        description=_optional_string(entry, "description", location),
    )


def _parse_case(entry: object, location: str) -> CaseDescriptor:
    """Parse a union case: a bare name, or a mapping with ``name`` and ``params``."""
    if isinstance(entry, str):
        return CaseDescriptor(name=entry)
    if not isinstance(entry, dict):
        raise DescriptorError(f"{location} must be a case name or a YAML mapping")

    name = _require_string(entry, "name", location)
    params = [
        _parse_param(p, f"{location}: params[{i}]") for i, p in enumerate(_list_of(entry, "params", location))
    ]
    return CaseDescriptor(name=name, params=params)


def _parse_param(entry: object, location: str) -> ParamDescriptor:
    """Parse a case parameter: a bare type expression, or a mapping with ``type`` and ``label``."""
    flag = False
    if isinstance(entry, str):
        label, expression = None, entry
    elif isinstance(entry, dict):
        label = _optional_string(entry, "label", location)
        expression = _type_expression(entry, location)
        flag = _optional_flag(entry, location)
    else:
        raise DescriptorError(f"{location} must be a type expression or a YAML mapping")

    try:
        slot_type, optional = parse_type_expression(expression)
    except DescriptorError as exc:
        raise DescriptorError(f"{location}: {exc}") from exc
    return ParamDescriptor(label=label, type=slot_type, optional=optional or flag)
