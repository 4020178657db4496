"""
Registry — owns operation tables by name.

Each registry is an explicit value; there is no process-wide table.
Pass it to (or hold it in) whatever needs the operations.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from kungfu import Result, Ok, Error

from multimethods._types import DispatchFn, DispatchError, HandlerFn, not_defined, not_found
from multimethods.registry._types import OperationTable
from multimethods.rules import Handler, rule as make_rule

logger = logging.getLogger(__name__)


class Registry:
    """
    Operation name → OperationTable.

    Mutations hold a lock only long enough to swap a table; readers
    take the current immutable table and scan it without locking.

    Example:
        registry = Registry()
        registry.define("greet", lambda lang: lang)
        registry.add_rule("greet", "en", greet_en)
        registry.add_rule("greet", "fr", greet_fr)

        invoke(registry, "greet", "fr")  # → Ok(greet_fr("fr"))
    """

    __slots__ = ("_detail", "_tables", "_lock")

    def __init__(self, detail: str = "registry") -> None:
        self._detail = detail
        self._tables: dict[str, OperationTable] = {}
        self._lock = threading.Lock()

    @property
    def detail(self) -> str:
        return self._detail

    # ───────────────────────────────────────────────────────────────────────────
    # Mutation
    # ───────────────────────────────────────────────────────────────────────────

    def define(self, name: str, dispatch_fn: DispatchFn | None = None) -> OperationTable:
        """
        Install an empty operation under name.

        Redefinition replaces the previous table (and its rules) silently.
        """
        table = OperationTable(name=name, dispatch_fn=dispatch_fn)
        with self._lock:
            replaced = name in self._tables
            self._tables[name] = table
        logger.debug(
            "%s: defined %r (keyed=%s, replaced=%s)",
            self._detail, name, table.keyed, replaced,
        )
        return table

    def add_rule(
        self,
        name: str,
        matcher: object,
        handler: Handler | HandlerFn,
    ) -> Result[OperationTable, DispatchError]:
        """
        Append (matcher, handler) to the named operation.

        Matcher and handler accept the shorthand understood by
        rules.as_matcher / rules.as_handler. Unknown name → Error,
        registry untouched.
        """
        new_rule = make_rule(matcher, handler)
        with self._lock:
            table = self._tables.get(name)
            if table is None:
                return Error(not_defined(name))
            table = table.with_rule(new_rule)
            self._tables[name] = table
        logger.debug(
            "%s: %r rule #%d %r → %s",
            self._detail, name, len(table), new_rule.matcher, new_rule.handler.name,
        )
        return Ok(table)

    def remove(self, name: str) -> bool:
        """Drop the operation. Returns True if it existed."""
        with self._lock:
            existed = self._tables.pop(name, None) is not None
        if existed:
            logger.debug("%s: removed %r", self._detail, name)
        return existed

    # ───────────────────────────────────────────────────────────────────────────
    # Lookup
    # ───────────────────────────────────────────────────────────────────────────

    def get(self, name: str) -> OperationTable | None:
        """Current table snapshot, or None."""
        return self._tables.get(name)

    def lookup(self, name: str) -> Result[OperationTable, DispatchError]:
        """Current table snapshot, or Error(OPERATION_NOT_FOUND)."""
        table = self._tables.get(name)
        if table is None:
            return Error(not_found(name))
        return Ok(table)

    def names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._tables)

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"Registry({self._detail!r}, operations={list(self.names())!r})"


__all__ = ("Registry",)
