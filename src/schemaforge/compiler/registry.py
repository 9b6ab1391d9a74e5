# Copyright 2026 SchemaForge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Name-keyed registry of compiled inner schemas.

Types reference each other by name in any order, so there is no fixed
compile order. The registry computes a type's inner schema the first time it
is requested and serves the cached fragment afterwards.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from schemaforge.compiler.errors import CyclicTypeReferenceError, DuplicateTypeNameError, UnresolvedTypeReferenceError
from schemaforge.model.entities import StructDescriptor, TypeGraph, UnionDescriptor
from schemaforge.schema.fragments import SchemaFragment

# ###############
# Public Interface
# ###############

Declaration = StructDescriptor | UnionDescriptor
CompileFn = Callable[[Declaration], SchemaFragment]


class ReferenceRegistry:
    """Resolves type names to memoized inner schema fragments.

    One instance may be shared by threads compiling different roots. A
    re-entrant lock guards both the cache lookup and the computation, so
    each name is computed at most once and readers only ever observe
    complete fragments. Nested resolution from inside *compile_fn* re-enters
    the lock on the same thread.

    Args:
        graph: The declarations available for resolution.
        compile_fn: Compiles one declaration into its inner schema. It may
            call :meth:`resolve` for the types the declaration references.

    Raises:
        DuplicateTypeNameError: If two declarations share a name.
    """

    def __init__(self, graph: TypeGraph, compile_fn: CompileFn) -> None:
        self._declarations: dict[str, Declaration] = {}
        for decl in graph.types:
            if decl.name in self._declarations:
                raise DuplicateTypeNameError(decl.name)
            self._declarations[decl.name] = decl
        self._compile_fn = compile_fn
        self._cache: dict[str, SchemaFragment] = {}
        self._in_progress: list[str] = []
        self._lock = threading.RLock()

    def resolve(self, name: str, *, referrer: str | None = None, slot: str | None = None) -> SchemaFragment:
        """Return the inner schema of type *name*, compiling it on first access.

        Args:
            name: The referenced type name.
            referrer: Name of the type holding the reference (error context).
            slot: Name of the field or parameter holding the reference (error context).

        Raises:
            UnresolvedTypeReferenceError: If *name* is not declared in the graph.
            CyclicTypeReferenceError: If *name* is already being compiled further
                up the current resolution chain.
        """
        with self._lock:
            cached = self._cache.get(name)
            if cached is not None:
                return cached
            decl = self._declarations.get(name)
            if decl is None:
                raise UnresolvedTypeReferenceError(name, type_name=referrer, slot=slot)
            if name in self._in_progress:
                start = self._in_progress.index(name)
                raise CyclicTypeReferenceError(self._in_progress[start:] + [name])
            self._in_progress.append(name)
            try:
                fragment = self._compile_fn(decl)
            finally:
                self._in_progress.pop()
            self._cache[name] = fragment
            return fragment

    def is_resolved(self, name: str) -> bool:
        """Return True if the inner schema for *name* has already been computed."""
        with self._lock:
            return name in self._cache
