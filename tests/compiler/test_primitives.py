# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the primitive type mapping."""

import pytest

from schemaforge.compiler.primitives import primitive_kind, type_ref, type_tag
from schemaforge.model import NamedTypeRef, PrimitiveKind, PrimitiveTypeRef


@pytest.mark.parametrize(
    ("kind", "tag"),
    [
        (PrimitiveKind.STRING, "string"),
        (PrimitiveKind.INTEGER, "integer"),
        (PrimitiveKind.NUMBER, "number"),
        (PrimitiveKind.BOOLEAN, "boolean"),
    ],
)
def test_type_tag(kind: PrimitiveKind, tag: str) -> None:
    assert type_tag(kind) == tag


@pytest.mark.parametrize(
    ("spelling", "kind"),
    [
        ("String", PrimitiveKind.STRING),
        ("str", PrimitiveKind.STRING),
        ("Int", PrimitiveKind.INTEGER),
        ("Int64", PrimitiveKind.INTEGER),
        ("integer", PrimitiveKind.INTEGER),
        ("Double", PrimitiveKind.NUMBER),
        ("CGFloat", PrimitiveKind.NUMBER),
        ("float", PrimitiveKind.NUMBER),
        ("Bool", PrimitiveKind.BOOLEAN),
        ("boolean", PrimitiveKind.BOOLEAN),
    ],
)
def test_primitive_spellings(spelling: str, kind: PrimitiveKind) -> None:
    assert primitive_kind(spelling) == kind


def test_custom_names_are_not_primitive() -> None:
    assert primitive_kind("Person") is None
    assert primitive_kind("STRING") is None
    assert primitive_kind("UInt") is None


def test_type_ref_classifies_names() -> None:
    assert type_ref("Int") == PrimitiveTypeRef(primitive=PrimitiveKind.INTEGER)
    assert type_ref("Person") == NamedTypeRef(name="Person")
