# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the descriptor file front-end."""

from pathlib import Path

import pytest

from schemaforge.compiler.descriptors import (
    DescriptorError,
    load_descriptors,
    merge_graphs,
    parse_descriptors,
    parse_type_expression,
)
from schemaforge.compiler.errors import UnsupportedDeclarationKindError
from schemaforge.compiler.synthesizer import synthesize
from schemaforge.model import (
    ArrayTypeRef,
    NamedTypeRef,
    PrimitiveKind,
    PrimitiveTypeRef,
    StructDescriptor,
    TypeGraph,
    UnionDescriptor,
)

# ###############
# Type expressions
# ###############


class TestTypeExpressions:
    def test_primitive(self) -> None:
        assert parse_type_expression("String") == (PrimitiveTypeRef(primitive=PrimitiveKind.STRING), False)

    def test_named(self) -> None:
        assert parse_type_expression(" Person ") == (NamedTypeRef(name="Person"), False)

    @pytest.mark.parametrize("expr", ["Int?", "Optional<Int>", "Int ?"])
    def test_optional(self, expr: str) -> None:
        assert parse_type_expression(expr) == (PrimitiveTypeRef(primitive=PrimitiveKind.INTEGER), True)

    def test_array(self) -> None:
        assert parse_type_expression("[Person]") == (ArrayTypeRef(element_type=NamedTypeRef(name="Person")), False)

    def test_optional_array(self) -> None:
        type_ref, optional = parse_type_expression("[Bool]?")
        assert type_ref == ArrayTypeRef(element_type=PrimitiveTypeRef(primitive=PrimitiveKind.BOOLEAN))
        assert optional

    @pytest.mark.parametrize("expr", ["[[Int]]", "[Int?]", "[Optional<Int>]", "", "[]", "?", "Map<K, V>"])
    def test_rejected(self, expr: str) -> None:
        with pytest.raises(DescriptorError):
            parse_type_expression(expr)


# ###############
# Files
# ###############

SAMPLE = """\
version: "1"
types:
  - kind: struct
    name: Person
    description: A person entity
    fields:
      - name: name
        type: String
        description: Full name
      - name: email
        type: String?
      - name: nickname
        type: String
        optional: true
      - name: friends
        type: [Person]
  - kind: union
    name: Priority
    cases: [low, medium, high]
  - kind: union
    name: Result
    description: Result type for operations
    cases:
      - name: success
        params: [String]
      - name: error
        params:
          - {label: code, type: Int}
          - {label: message, type: String}
"""


class TestParseDescriptors:
    def test_declarations(self) -> None:
        graph = parse_descriptors(SAMPLE)
        assert graph.names() == ["Person", "Priority", "Result"]
        assert isinstance(graph.types[0], StructDescriptor)
        assert isinstance(graph.types[1], UnionDescriptor)

    def test_fields(self) -> None:
        person = parse_descriptors(SAMPLE).get("Person")
        assert isinstance(person, StructDescriptor)
        assert person.description == "A person entity"
        assert [f.name for f in person.fields] == ["name", "email", "nickname", "friends"]
        assert person.fields[0].description == "Full name"
        assert [f.optional for f in person.fields] == [False, True, True, False]
        assert person.fields[3].type == ArrayTypeRef(element_type=NamedTypeRef(name="Person"))

    def test_bare_case_shorthand(self) -> None:
        priority = parse_descriptors(SAMPLE).get("Priority")
        assert isinstance(priority, UnionDescriptor)
        assert priority.is_simple
        assert [c.name for c in priority.cases] == ["low", "medium", "high"]

    def test_params(self) -> None:
        result = parse_descriptors(SAMPLE).get("Result")
        assert isinstance(result, UnionDescriptor)
        assert not result.is_simple
        assert result.cases[0].param_keys() == ["_0"]
        assert result.cases[1].param_keys() == ["code", "message"]

    def test_optional_params(self) -> None:
        text = """\
types:
  - kind: union
    name: U
    cases:
      - name: c
        params:
          - Int?
          - Optional<Person>
          - {label: tags, type: "[String]?"}
          - {label: note, type: String, optional: true}
          - {label: count, type: Int}
"""
        case = parse_descriptors(text).get("U").cases[0]
        assert [p.optional for p in case.params] == [True, True, True, True, False]
        assert case.params[1].type == NamedTypeRef(name="Person")
        assert case.params[2].type == ArrayTypeRef(element_type=PrimitiveTypeRef(primitive=PrimitiveKind.STRING))

    def test_json_input(self) -> None:
        text = '{"types": [{"kind": "struct", "name": "P", "fields": [{"name": "x", "type": "Double"}]}]}'
        graph = parse_descriptors(text)
        assert synthesize(graph, "P")["schema"]["properties"] == {"x": {"type": "number"}}

    def test_empty_document_lists(self) -> None:
        graph = parse_descriptors("types:\n  - {kind: struct, name: E, fields: }\n")
        assert graph.types[0] == StructDescriptor(name="E")

    def test_version_as_integer(self) -> None:
        assert parse_descriptors("version: 1\ntypes: []\n") == TypeGraph()


class TestParseErrors:
    def test_unknown_kind(self) -> None:
        with pytest.raises(UnsupportedDeclarationKindError) as exc_info:
            parse_descriptors("types:\n  - {kind: protocol, name: P}\n")
        assert exc_info.value.kind == "protocol"
        assert exc_info.value.type_name == "P"

    def test_missing_kind(self) -> None:
        with pytest.raises(UnsupportedDeclarationKindError):
            parse_descriptors("types:\n  - {name: P}\n")

    def test_unsupported_version(self) -> None:
        with pytest.raises(DescriptorError, match="version"):
            parse_descriptors('version: "2"\ntypes: []\n')

    def test_not_a_mapping(self) -> None:
        with pytest.raises(DescriptorError, match="mapping"):
            parse_descriptors("- a\n- b\n")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(DescriptorError, match="Invalid YAML"):
            parse_descriptors("types: [unclosed\n")

    def test_types_not_a_list(self) -> None:
        with pytest.raises(DescriptorError, match="'types' must be a list"):
            parse_descriptors("types: {}\n")

    def test_missing_field_type(self) -> None:
        with pytest.raises(DescriptorError, match="missing required field 'type'"):
            parse_descriptors("types:\n  - {kind: struct, name: S, fields: [{name: a}]}\n")

    def test_bad_optional_flag(self) -> None:
        with pytest.raises(DescriptorError, match="'optional' must be a boolean"):
            parse_descriptors(
                "types:\n  - {kind: struct, name: S, fields: [{name: a, type: Int, optional: yes-ish}]}\n"
            )

    def test_bad_parameter_optional_flag(self) -> None:
        with pytest.raises(DescriptorError, match="params\[0\]: 'optional' must be a boolean"):
            parse_descriptors(
                "types:\n  - {kind: union, name: U, cases: [{name: c, params: [{type: Int, optional: 1}]}]}\n"
            )

    def test_error_mentions_location(self) -> None:
        with pytest.raises(DescriptorError) as exc_info:
            parse_descriptors("types:\n  - {kind: struct, name: S, fields: [{name: a, type: '[[Int]]'}]}\n", "f.yaml")
        message = str(exc_info.value)
        assert "f.yaml" in message
        assert "fields[0]" in message


# ###############
# Loading and merging
# ###############


def test_load_descriptors(tmp_path: Path) -> None:
    path = tmp_path / "types.yaml"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_descriptors(path).names() == ["Person", "Priority", "Result"]


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DescriptorError, match="not found"):
        load_descriptors(tmp_path / "missing.yaml")


def test_merge_graphs_preserves_order_and_duplicates() -> None:
    a = TypeGraph(types=[StructDescriptor(name="A"), StructDescriptor(name="B")])
    b = TypeGraph(types=[StructDescriptor(name="A")])
    assert merge_graphs([a, b]).names() == ["A", "B", "A"]
