# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Struct, union, and graph descriptors for the SchemaForge descriptor model."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from schemaforge.model.types import FieldDescriptor, ParamDescriptor

# ###############
# Public Interface
# ###############

GRAPH_FORMAT_VERSION = "1"


class CaseDescriptor(BaseModel):
    """A single case of a tagged union. A case without params is bare."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    params: list[ParamDescriptor] = _Field(default_factory=list)

    @property
    def is_bare(self) -> bool:
        return not self.params

    def param_keys(self) -> list[str]:
        """Return the effective property keys of the params, in order."""
        return [p.key(i) for i, p in enumerate(self.params)]


class StructDescriptor(BaseModel):
    """A record type with ordered fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["struct"] = "struct"
    name: str
    fields: list[FieldDescriptor] = _Field(default_factory=list)
    description: str | None = None


class UnionDescriptor(BaseModel):
    """A tagged union whose cases may carry payload parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["union"] = "union"
    name: str
    cases: list[CaseDescriptor] = _Field(default_factory=list)
    description: str | None = None

    @property
    def is_simple(self) -> bool:
        """True when no case carries parameters (compiled to a string enum)."""
        return all(c.is_bare for c in self.cases)


# A declaration in the graph. The `kind` discriminator keeps deserialization unambiguous.
TypeDescriptor = Annotated[StructDescriptor | UnionDescriptor, _Field(discriminator="kind")]


class TypeGraph(BaseModel):
    """The immutable set of declarations a synthesis run works on."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = GRAPH_FORMAT_VERSION
    types: list[TypeDescriptor] = _Field(default_factory=list)

    def names(self) -> list[str]:
        """Return the declared type names in declaration order."""
        return [t.name for t in self.types]

    def get(self, name: str) -> StructDescriptor | UnionDescriptor | None:
        """Return the first declaration named *name*, or None."""
        for decl in self.types:
            if decl.name == name:
                return decl
        return None


TypeGraph.model_rebuild()
