# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema compiler: descriptor loading, semantic analysis, and synthesis."""

from schemaforge.compiler.build import CompilerError, build_project, compile_graph, load_graph, render_document
from schemaforge.compiler.descriptors import (
    DescriptorError,
    load_descriptors,
    merge_graphs,
    parse_descriptors,
    parse_type_expression,
)
from schemaforge.compiler.errors import (
    CyclicTypeReferenceError,
    DuplicateMemberNameError,
    DuplicateTypeNameError,
    SchemaError,
    UnresolvedTypeReferenceError,
    UnsupportedDeclarationKindError,
)
from schemaforge.compiler.primitives import primitive_kind, type_ref, type_tag
from schemaforge.compiler.registry import ReferenceRegistry
from schemaforge.compiler.semantic_analysis import SemanticError, analyze
from schemaforge.compiler.synthesizer import (
    SchemaSynthesizer,
    build_slot_schema,
    compile_struct,
    compile_union,
    synthesize,
    synthesize_all,
)

__all__ = [
    "SchemaSynthesizer",
    "synthesize",
    "synthesize_all",
    "build_slot_schema",
    "compile_struct",
    "compile_union",
    "ReferenceRegistry",
    "type_tag",
    "primitive_kind",
    "type_ref",
    "SchemaError",
    "UnsupportedDeclarationKindError",
    "UnresolvedTypeReferenceError",
    "DuplicateMemberNameError",
    "DuplicateTypeNameError",
    "CyclicTypeReferenceError",
    "parse_descriptors",
    "load_descriptors",
    "parse_type_expression",
    "merge_graphs",
    "DescriptorError",
    "analyze",
    "SemanticError",
    "load_graph",
    "compile_graph",
    "render_document",
    "build_project",
    "CompilerError",
]
