# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptor model consumed by the schema synthesizer."""

from schemaforge.model.entities import (
    GRAPH_FORMAT_VERSION,
    CaseDescriptor,
    StructDescriptor,
    TypeDescriptor,
    TypeGraph,
    UnionDescriptor,
)
from schemaforge.model.types import (
    ArrayTypeRef,
    ElementTypeRef,
    FieldDescriptor,
    NamedTypeRef,
    ParamDescriptor,
    PrimitiveKind,
    PrimitiveTypeRef,
    TypeRef,
    named_refs,
)

__all__ = [
    # Type references and slots
    "PrimitiveKind",
    "PrimitiveTypeRef",
    "NamedTypeRef",
    "ArrayTypeRef",
    "ElementTypeRef",
    "TypeRef",
    "FieldDescriptor",
    "ParamDescriptor",
    "named_refs",
    # Declarations
    "CaseDescriptor",
    "StructDescriptor",
    "UnionDescriptor",
    "TypeDescriptor",
    "TypeGraph",
    "GRAPH_FORMAT_VERSION",
]
