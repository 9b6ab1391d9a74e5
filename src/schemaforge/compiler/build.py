# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Build workflow: from descriptor files to schema documents on disk.

The build stops at the first failing stage. Semantic and validation errors
are collected and reported together; synthesis itself fails fast. No output
file is written unless every requested root compiled.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from schemaforge.compiler.descriptors import DescriptorError, load_descriptors, merge_graphs
from schemaforge.compiler.errors import SchemaError
from schemaforge.compiler.semantic_analysis import analyze
from schemaforge.compiler.synthesizer import SchemaSynthesizer
from schemaforge.model.entities import TypeGraph
from schemaforge.project.config import ProjectConfig
from schemaforge.validation.checks import validate

# ###############
# Public Interface
# ###############

SCHEMA_SUFFIX = ".json"


class CompilerError(Exception):
    """Raised when the build encounters any unrecoverable error.

    Covers unreadable or malformed descriptor files, semantic errors,
    validation errors, unknown root types, and synthesis failures.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


def load_graph(directory: Path, sources: list[str]) -> TypeGraph:
    """Load and merge the descriptor files *sources*, relative to *directory*.

    Raises:
        CompilerError: If any file cannot be loaded.
    """
    graphs: list[TypeGraph] = []
    for source in sources:
        path = directory / source
        try:
            graphs.append(load_descriptors(path))
        except (DescriptorError, SchemaError) as exc:
            raise CompilerError(f"Cannot load descriptor file '{path}': {exc}") from exc
    return merge_graphs(graphs)


def compile_graph(graph: TypeGraph, roots: list[str] | None = None) -> dict[str, dict[str, Any]]:
    """Check *graph* and compile the requested roots into schema documents.

    Args:
        graph: The merged type descriptor graph.
        roots: Names of the types to emit. ``None`` emits every declared
            type in declaration order.

    Returns:
        A mapping from root type name to its enveloped schema document.

    Raises:
        CompilerError: On semantic errors, validation errors, unknown roots,
            or synthesis failures.
    """
    errors = analyze(graph)
    if errors:
        error_lines = "\n".join(f"  {e.message}" for e in errors)
        raise CompilerError(f"Semantic errors:\n{error_lines}")

    result = validate(graph)
    if result.has_errors:
        error_lines = "\n".join(f"  {e.message}" for e in result.errors)
        raise CompilerError(f"Validation errors:\n{error_lines}")

    names = graph.names() if roots is None else roots
    unknown = [name for name in names if graph.get(name) is None]
    if unknown:
        raise CompilerError(f"Unknown root type(s): {', '.join(unknown)}")

    synthesizer = SchemaSynthesizer(graph)
    documents: dict[str, dict[str, Any]] = {}
    for name in names:
        try:
            documents[name] = synthesizer.compile(name)
        except SchemaError as exc:
            raise CompilerError(f"Cannot compile '{name}': {exc}") from exc
    return documents


def render_document(document: dict[str, Any], *, indent: int | None = 2, sort_keys: bool = False) -> str:
    """Render a schema document as JSON text with a trailing newline."""
    return json.dumps(document, indent=indent, sort_keys=sort_keys, ensure_ascii=False) + "\n"


def build_project(directory: Path, config: ProjectConfig) -> list[Path]:
    """Compile a project and write one ``<Name>.json`` file per root.

    A file is rewritten only when its content changed, so unchanged schemas
    keep their timestamps.

    Args:
        directory: The project root; relative config paths are resolved against it.
        config: The parsed project configuration.

    Returns:
        The paths of the files that were written.

    Raises:
        CompilerError: On any load or compilation failure, or if an output
            file cannot be written.
    """
    graph = load_graph(directory, config.sources)
    documents = compile_graph(graph, config.roots)

    output_dir = directory / config.output_directory
    written: list[Path] = []
    for name, document in documents.items():
        path = output_dir / (name + SCHEMA_SUFFIX)
        text = render_document(document, indent=config.indent, sort_keys=config.sort_keys)
        if path.exists() and path.read_text(encoding="utf-8") == text:
            continue
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise CompilerError(f"Cannot write schema file '{path}': {exc}") from exc
        written.append(path)
    return written
