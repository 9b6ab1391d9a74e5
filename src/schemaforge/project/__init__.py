# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for SchemaForge."""

from schemaforge.project.config import (
    CONFIG_FILE_NAME,
    DEFAULT_INDENT,
    ProjectConfig,
    ProjectConfigError,
    default_config_text,
    load_project_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_INDENT",
    "ProjectConfig",
    "ProjectConfigError",
    "default_config_text",
    "load_project_config",
]
