# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the SchemaForge project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".schemaforge.yaml"

DEFAULT_INDENT = 2


class ProjectConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


@dataclass
class ProjectConfig:
    """The parsed configuration for a SchemaForge project.

    Attributes:
        output_directory: Relative path (from the project root) for generated schemas.
        sources: Descriptor files, relative to the project root, in load order.
        roots: Type names to emit. ``None`` emits every declared type.
        indent: JSON indentation of the generated files.
        sort_keys: Whether generated files sort object keys.
    """

    output_directory: str
    sources: list[str] = field(default_factory=list)
    roots: list[str] | None = None
    indent: int = DEFAULT_INDENT
    sort_keys: bool = False


def load_project_config(path: Path) -> ProjectConfig:
    """Load and parse a SchemaForge project configuration file.

    Args:
        path: Path to the `.schemaforge.yaml` file.

    Returns:
        A ProjectConfig instance populated from the file.

    Raises:
        ProjectConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ProjectConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise ProjectConfigError(f"Cannot read project config file: {exc}") from exc

    return _parse_project_config(text, source_label=str(path))


def default_config_text() -> str:
    """Return the starter configuration written by ``schemaforge init``."""
    return (
        "# SchemaForge Project Configuration\n"
        "# Descriptor files listed under 'sources' are compiled into\n"
        "# structured-output schemas under 'output-directory'.\n"
        "\n"
        "output-directory: schemas\n"
        "sources:\n"
        "  - types.yaml\n"
    )


# ################
# Implementation
# ################


def _parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse project config YAML text into a ProjectConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ProjectConfigError: If the YAML is invalid or required fields are missing.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise ProjectConfigError(f"{source_label}: project config must be a YAML mapping")

    output_directory = _require_string(data, "output-directory", source_label)
    if "sources" not in data:
        raise ProjectConfigError(f"{source_label}: missing required field 'sources'")
    sources = _string_list(data["sources"], "sources", source_label)

    roots: list[str] | None = None
    if data.get("roots") is not None:
        roots = _string_list(data["roots"], "roots", source_label)

    indent = data.get("indent", DEFAULT_INDENT)
    # bool is a subclass of int; reject `indent: true`.
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ProjectConfigError(f"{source_label}: 'indent' must be a non-negative integer")

    sort_keys = data.get("sort-keys", False)
    if not isinstance(sort_keys, bool):
        raise ProjectConfigError(f"{source_label}: 'sort-keys' must be a boolean")

    return ProjectConfig(
        output_directory=output_directory,
        sources=sources,
        roots=roots,
        indent=indent,
        sort_keys=sort_keys,
    )


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising ProjectConfigError if missing."""
    if key not in mapping:
        raise ProjectConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise ProjectConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _string_list(value: object, key: str, source_label: str) -> list[str]:
    if not isinstance(value, list):
        raise ProjectConfigError(f"{source_label}: '{key}' must be a list")
    for index, entry in enumerate(value):
        if not isinstance(entry, str):
            raise ProjectConfigError(f"{source_label}: {key}[{index}] must be a string")
    return list(value)
