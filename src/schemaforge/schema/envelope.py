# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Outer ``json_schema`` envelope expected by structured-output requests."""

from __future__ import annotations

from typing import Any

from schemaforge.schema.fragments import SchemaFragment

# ###############
# Public Interface
# ###############

ENVELOPE_TYPE = "json_schema"


def wrap(name: str, inner: SchemaFragment) -> dict[str, Any]:
    """Wrap a compiled inner schema in the ``{type, name, strict, schema}`` envelope."""
    return {
        "type": ENVELOPE_TYPE,
        "name": name,
        "strict": True,
        "schema": inner.to_dict(),
    }
