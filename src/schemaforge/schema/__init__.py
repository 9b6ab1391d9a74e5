# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured-output schema fragments and the outer envelope."""

from schemaforge.schema.envelope import ENVELOPE_TYPE, wrap
from schemaforge.schema.fragments import (
    AnyOfSchema,
    ArraySchema,
    NullSchema,
    ObjectSchema,
    ScalarSchema,
    SchemaFragment,
    StringEnumSchema,
    merge_description,
)

__all__ = [
    "AnyOfSchema",
    "ArraySchema",
    "NullSchema",
    "ObjectSchema",
    "ScalarSchema",
    "SchemaFragment",
    "StringEnumSchema",
    "merge_description",
    "ENVELOPE_TYPE",
    "wrap",
]
