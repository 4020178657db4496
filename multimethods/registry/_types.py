"""
Registry types — one operation's dispatch table.
"""

from __future__ import annotations

from dataclasses import dataclass

from multimethods._types import DispatchFn
from multimethods.rules import Rule


@dataclass(frozen=True, slots=True)
class OperationTable:
    """
    Named operation: optional dispatch function + ordered rules.

    Immutable. Registration swaps in a new table, so a scan in
    progress always sees one consistent rule sequence.
    """

    name: str
    dispatch_fn: DispatchFn | None = None
    rules: tuple[Rule, ...] = ()

    @property
    def keyed(self) -> bool:
        """Whether calls compute a dispatch key."""
        return self.dispatch_fn is not None

    def with_rule(self, rule: Rule) -> OperationTable:
        """Append rule (returns a new table)."""
        return OperationTable(
            name=self.name,
            dispatch_fn=self.dispatch_fn,
            rules=(*self.rules, rule),
        )

    def __len__(self) -> int:
        return len(self.rules)


__all__ = ("OperationTable",)
