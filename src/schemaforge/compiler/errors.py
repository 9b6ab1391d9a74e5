# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while synthesizing schemas from a type descriptor graph.

Synthesis fails fast: the first invalid declaration encountered while
compiling a root type aborts that root, and no partial schema is returned.
"""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class SchemaError(Exception):
    """Base class for all synthesis errors.

    Attributes:
        type_name: Name of the declaration where the problem was found, if known.
    """

    def __init__(self, message: str, *, type_name: str | None = None) -> None:
        super().__init__(message)
        self.type_name = type_name


class UnsupportedDeclarationKindError(SchemaError):
    """Raised when a declaration is neither a struct nor a union."""

    def __init__(self, kind: object, *, type_name: str | None = None) -> None:
        where = f" for type '{type_name}'" if type_name is not None else ""
        super().__init__(
            f"Unsupported declaration kind {kind!r}{where}: expected 'struct' or 'union'",
            type_name=type_name,
        )
        self.kind = kind


class UnresolvedTypeReferenceError(SchemaError):
    """Raised when a slot names a type that is not declared in the graph.

    Attributes:
        reference: The unresolved type name.
        slot: Name of the field or parameter holding the reference, if known.
    """

    def __init__(self, reference: str, *, type_name: str | None = None, slot: str | None = None) -> None:
        if type_name is not None and slot is not None:
            message = f"Unresolved type reference '{reference}' in '{type_name}.{slot}'"
        elif type_name is not None:
            message = f"Unresolved type reference '{reference}' in '{type_name}'"
        else:
            message = f"Unresolved type reference '{reference}'"
        super().__init__(message, type_name=type_name)
        self.reference = reference
        self.slot = slot


class DuplicateMemberNameError(SchemaError):
    """Raised when two fields, cases, or case parameters share a name."""

    def __init__(self, member: str, *, type_name: str, member_kind: str) -> None:
        super().__init__(f"Duplicate {member_kind} name '{member}' in '{type_name}'", type_name=type_name)
        self.member = member
        self.member_kind = member_kind


class DuplicateTypeNameError(SchemaError):
    """Raised when two declarations in one graph share a type name."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Duplicate type name '{type_name}'", type_name=type_name)


class CyclicTypeReferenceError(SchemaError):
    """Raised when a type reaches itself through a chain of references.

    Attributes:
        cycle: The type names forming the cycle, with the first repeated at the end.
    """

    def __init__(self, cycle: list[str]) -> None:
        super().__init__(f"Cyclic type reference: {' -> '.join(cycle)}", type_name=cycle[0])
        self.cycle = cycle
