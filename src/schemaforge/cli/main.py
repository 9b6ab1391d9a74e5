# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the SchemaForge command-line interface."""

import argparse
import sys
from pathlib import Path

from schemaforge.compiler.build import CompilerError, build_project, compile_graph, load_graph, render_document
from schemaforge.compiler.descriptors import DescriptorError, load_descriptors
from schemaforge.compiler.errors import SchemaError
from schemaforge.compiler.semantic_analysis import analyze
from schemaforge.project.config import (
    CONFIG_FILE_NAME,
    ProjectConfig,
    ProjectConfigError,
    default_config_text,
    load_project_config,
)
from schemaforge.validation.checks import validate

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the SchemaForge CLI."""
    parser = argparse.ArgumentParser(
        prog="schemaforge",
        description="SchemaForge - structured-output JSON schemas from type descriptors",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new SchemaForge project",
        description=f"Create a starter {CONFIG_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the project in (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the type descriptors of a project",
        description="Report semantic errors and validation warnings for the project's descriptor files.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the SchemaForge project (default: current directory)",
    )

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate schema files for a project",
        description="Compile the project's descriptor files and write one schema file per root type.",
    )
    generate_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the SchemaForge project (default: current directory)",
    )

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print schemas from a descriptor file",
        description="Compile types from a single descriptor file and print their schema documents.",
    )
    show_parser.add_argument("file", help="Descriptor file (YAML or JSON)")
    show_parser.add_argument(
        "types",
        nargs="*",
        metavar="TYPE",
        help="Types to print (default: all types in declaration order)",
    )
    show_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    show_parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="Sort object keys in the output",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "show":
        return _cmd_show(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(f"Error: project already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text(default_config_text(), encoding="utf-8")
    print(f"Initialized SchemaForge project at '{config_file}'.")
    return 0


def _load_project(directory_arg: str) -> tuple[Path, ProjectConfig] | None:
    """Resolve the project directory and load its configuration, reporting failures."""
    directory = Path(directory_arg).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(
            f"Error: no SchemaForge project found at '{directory}'. Run 'schemaforge init' to create one.",
            file=sys.stderr,
        )
        return None

    try:
        config = load_project_config(config_file)
    except ProjectConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    return directory, config


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    loaded = _load_project(args.directory)
    if loaded is None:
        return 1
    directory, config = loaded

    try:
        graph = load_graph(directory, config.sources)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Checking {len(config.sources)} descriptor file(s), {len(graph.types)} type(s)...")

    errors = analyze(graph)
    for error in errors:
        print(f"Error: {error.message}", file=sys.stderr)
    if errors:
        return 1

    result = validate(graph)
    for warning in result.warnings:
        print(f"Warning: {warning.message}", file=sys.stderr)
    for error in result.errors:
        print(f"Error: {error.message}", file=sys.stderr)
    if result.has_errors:
        return 1

    if config.roots is not None:
        unknown = [name for name in config.roots if graph.get(name) is None]
        if unknown:
            print(f"Error: unknown root type(s): {', '.join(unknown)}", file=sys.stderr)
            return 1

    print("No issues found." if not result.warnings else f"Check passed with {len(result.warnings)} warning(s).")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    loaded = _load_project(args.directory)
    if loaded is None:
        return 1
    directory, config = loaded

    try:
        written = build_project(directory, config)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path in written:
        print(f"Wrote '{path}'.")
    if not written:
        print("All schemas are up to date.")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    if args.indent < 0:
        print("Error: --indent must be non-negative.", file=sys.stderr)
        return 1

    try:
        graph = load_descriptors(Path(args.file))
    except (DescriptorError, SchemaError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        documents = compile_graph(graph, args.types or None)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for document in documents.values():
        sys.stdout.write(render_document(document, indent=args.indent, sort_keys=args.sort_keys))
    return 0
