"""
Core types for multimethods.

Re-exports from kungfu + dispatch error taxonomy + callable aliases.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Callable Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type DispatchFn = Callable[..., Any]
"""Computes the dispatch key from the call arguments."""

type PredicateFn = Callable[..., bool]
"""Arbitrary runtime condition over the call arguments."""

type HandlerFn = Callable[..., Any]
"""Implementation selected for a call."""

# ═══════════════════════════════════════════════════════════════════════════════
# Dispatch Errors
# ═══════════════════════════════════════════════════════════════════════════════


class DispatchErrorKind(Enum):
    """Dispatch error kinds."""

    OPERATION_NOT_DEFINED = auto()  # add_rule before define
    OPERATION_NOT_FOUND = auto()  # invoke on unknown name
    CONFLICTING_DISPATCH_MODE = auto()  # dispatch_fn mixed with a predicate
    NO_MATCHING_HANDLER = auto()  # nothing matched, no fallback
    MISSING_DISPATCH_KEY = auto()  # literal key without dispatch_fn


@dataclass(frozen=True, slots=True)
class DispatchError:
    """Dispatch failure for a single operation."""

    kind: DispatchErrorKind
    operation: str
    message: str

    def __str__(self) -> str:
        return f"{self.operation}: {self.message}"


class DispatchFailure(Exception):
    """
    Raised at the call-style seams (Multi.__call__, dispatch.call).

    Carries the DispatchError that would otherwise be returned as a value.
    """

    def __init__(self, error: DispatchError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> DispatchErrorKind:
        return self.error.kind


def not_defined(name: str) -> DispatchError:
    return DispatchError(
        DispatchErrorKind.OPERATION_NOT_DEFINED,
        name,
        f"operation {name!r} not defined",
    )


def not_found(name: str) -> DispatchError:
    return DispatchError(
        DispatchErrorKind.OPERATION_NOT_FOUND,
        name,
        f"operation {name!r} not found",
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Callable aliases
    "DispatchFn",
    "PredicateFn",
    "HandlerFn",
    # Errors
    "DispatchErrorKind",
    "DispatchError",
    "DispatchFailure",
    "not_defined",
    "not_found",
)
