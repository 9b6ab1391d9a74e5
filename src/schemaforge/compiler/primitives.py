# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping between primitive kinds, their source spellings, and schema type tags."""

from __future__ import annotations

from schemaforge.model.types import NamedTypeRef, PrimitiveKind, PrimitiveTypeRef

# ###############
# Public Interface
# ###############


def type_tag(kind: PrimitiveKind) -> str:
    """Return the schema ``type`` tag for a primitive kind."""
    return _TYPE_TAGS[kind]


def primitive_kind(name: str) -> PrimitiveKind | None:
    """Return the primitive kind spelled *name*, or None for a custom type name."""
    return _SPELLINGS.get(name)


def type_ref(name: str) -> PrimitiveTypeRef | NamedTypeRef:
    """Classify a type name as a primitive or a reference to a custom type."""
    kind = primitive_kind(name)
    if kind is not None:
        return PrimitiveTypeRef(primitive=kind)
    return NamedTypeRef(name=name)


# ################
# Implementation
# ################

_TYPE_TAGS: dict[PrimitiveKind, str] = {
    PrimitiveKind.STRING: "string",
    PrimitiveKind.INTEGER: "integer",
    PrimitiveKind.NUMBER: "number",
    PrimitiveKind.BOOLEAN: "boolean",
}

_SPELLINGS: dict[str, PrimitiveKind] = {
    **{s: PrimitiveKind.STRING for s in ("string", "String", "str")},
    **{s: PrimitiveKind.INTEGER for s in ("integer", "int", "Int", "Int8", "Int16", "Int32", "Int64")},
    **{s: PrimitiveKind.NUMBER for s in ("number", "float", "double", "Float", "Double", "CGFloat")},
    **{s: PrimitiveKind.BOOLEAN for s in ("boolean", "bool", "Bool")},
}
