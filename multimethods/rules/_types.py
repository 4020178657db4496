"""
Rule types — matchers, handlers, rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from multimethods._types import PredicateFn, HandlerFn

# ═══════════════════════════════════════════════════════════════════════════════
# Matchers — Decide Whether a Rule Applies
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Predicate:
    """Matches when test(*args, **kwargs) is truthy."""

    test: PredicateFn


@dataclass(frozen=True, slots=True)
class LiteralKey:
    """Matches when the computed dispatch key equals value."""

    value: object


@dataclass(frozen=True, slots=True)
class DefaultMarker:
    """
    Marks a rule's handler as the operation's fallback.

    Never matches during the scan; used only when nothing else did.
    """

    def __repr__(self) -> str:
        return "DEFAULT"


DEFAULT: Final = DefaultMarker()

type Matcher = Predicate | LiteralKey | DefaultMarker

# ═══════════════════════════════════════════════════════════════════════════════
# Handler — Implementation + Captured Context
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Handler:
    """
    Implementation selected by the dispatcher.

    bound holds the captured receiver context, passed as leading
    positional arguments: fn(*bound, *args, **kwargs).
    """

    fn: HandlerFn
    bound: tuple[object, ...] = ()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.fn(*self.bound, *args, **kwargs)

    @property
    def name(self) -> str:
        return getattr(self.fn, "__qualname__", repr(self.fn))


# ═══════════════════════════════════════════════════════════════════════════════
# Rule
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Rule:
    """Immutable (matcher, handler) pair registered against an operation."""

    matcher: Matcher
    handler: Handler


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Predicate",
    "LiteralKey",
    "DefaultMarker",
    "DEFAULT",
    "Matcher",
    "Handler",
    "Rule",
)
