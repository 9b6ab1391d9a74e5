# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type references and slot descriptors for the SchemaForge descriptor model."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveKind(Enum):
    """Primitive kinds supported by the structured-output dialect."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"


class PrimitiveTypeRef(BaseModel):
    """Reference to a primitive type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveKind


class NamedTypeRef(BaseModel):
    """Reference to a struct or union declared elsewhere in the graph."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["named"] = "named"
    name: str


# Element of an array slot. Arrays do not nest.
ElementTypeRef = Annotated[PrimitiveTypeRef | NamedTypeRef, _Field(discriminator="kind")]


class ArrayTypeRef(BaseModel):
    """A sequence of a primitive or named element type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["array"] = "array"
    element_type: ElementTypeRef


# The type of a slot (struct field or union-case parameter).
TypeRef = Annotated[PrimitiveTypeRef | NamedTypeRef | ArrayTypeRef, _Field(discriminator="kind")]


class FieldDescriptor(BaseModel):
    """A named, typed field of a struct.

    Optionality is a flag on the field rather than a wrapper type: an
    optional field keeps its position in the ``required`` list and is
    represented by a nullable schema instead.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: TypeRef
    optional: bool = False
    description: str | None = None


class ParamDescriptor(BaseModel):
    """A payload parameter of a union case, labeled or positional.

    Like a field, an optional parameter keeps its key in the case's
    ``required`` list and is represented by a nullable schema.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str | None = None
    type: TypeRef
    optional: bool = False

    def key(self, index: int) -> str:
        """Return the property key for this parameter at position *index*."""
        return self.label if self.label is not None else f"_{index}"


def named_refs(type_ref: TypeRef) -> list[str]:
    """Return the custom type names referenced by *type_ref*."""
    if isinstance(type_ref, NamedTypeRef):
        return [type_ref.name]
    if isinstance(type_ref, ArrayTypeRef):
        return named_refs(type_ref.element_type)
    return []


ArrayTypeRef.model_rebuild()
FieldDescriptor.model_rebuild()
ParamDescriptor.model_rebuild()
