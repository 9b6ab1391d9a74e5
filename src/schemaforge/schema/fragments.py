# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema fragment variants produced by the synthesizer.

A fragment is any piece of a compiled inner schema: a property value, array
``items``, an ``anyOf`` branch, or the whole inner schema of a type. The set
of variants is closed and every variant is immutable, so memoized fragments
can be shared between referencing types. ``to_dict`` renders fresh plain
dicts in a fixed key order.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

# ###############
# Public Interface
# ###############

NULL_TYPE = "null"


@dataclass(frozen=True)
class ScalarSchema:
    """A primitive value, e.g. ``{"type": "string"}`` or ``{"type": ["integer", "null"]}``."""

    type: str
    nullable: bool = False
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": _type_value(self.type, self.nullable)}
        return _with_description(d, self.description)


@dataclass(frozen=True)
class NullSchema:
    """The ``{"type": "null"}`` branch of a nullable ``anyOf``."""

    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _with_description({"type": NULL_TYPE}, self.description)


@dataclass(frozen=True)
class ArraySchema:
    """A sequence whose elements all match *items*."""

    items: SchemaFragment
    nullable: bool = False
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": _type_value("array", self.nullable), "items": self.items.to_dict()}
        return _with_description(d, self.description)


@dataclass(frozen=True)
class ObjectSchema:
    """A closed object. Every property is required, in declaration order."""

    properties: tuple[tuple[str, SchemaFragment], ...] = ()
    description: str | None = None

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.properties)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "type": "object",
            "properties": {key: value.to_dict() for key, value in self.properties},
            "required": list(self.required),
            "additionalProperties": False,
        }
        return _with_description(d, self.description)


@dataclass(frozen=True)
class StringEnumSchema:
    """A string restricted to a fixed list of values."""

    values: tuple[str, ...] = ()
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": "string", "enum": list(self.values)}
        return _with_description(d, self.description)


@dataclass(frozen=True)
class AnyOfSchema:
    """A value matching at least one of *branches*."""

    branches: tuple[SchemaFragment, ...] = ()
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"anyOf": [b.to_dict() for b in self.branches]}
        return _with_description(d, self.description)


SchemaFragment = ScalarSchema | NullSchema | ArraySchema | ObjectSchema | StringEnumSchema | AnyOfSchema


def merge_description(fragment: SchemaFragment, description: str | None) -> SchemaFragment:
    """Attach *description* to *fragment* unless it already has one.

    The fragment's own description wins; the new one is dropped. The
    original fragment is never modified.
    """
    if description is None or fragment.description is not None:
        return fragment
    return dataclasses.replace(fragment, description=description)


# ################
# Implementation
# ################


def _type_value(tag: str, nullable: bool) -> str | list[str]:
    return [tag, NULL_TYPE] if nullable else tag


def _with_description(d: dict[str, Any], description: str | None) -> dict[str, Any]:
    if description is not None:
        d["description"] = description
    return d
