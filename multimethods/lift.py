"""
Lift — helpers for lifting dispatch into kungfu lazy computations.
"""

from __future__ import annotations

from typing import Any

from kungfu import LazyCoroResult, Result

from multimethods._types import DispatchError
from multimethods.dispatch import invoke
from multimethods.registry import Registry


def from_result[T, E](result: Result[T, E]) -> LazyCoroResult[T, E]:
    """Lift a Result into LazyCoroResult."""
    async def _run() -> Result[T, E]:
        return result
    return LazyCoroResult(_run)


def lazy_invoke(
    registry: Registry,
    name: str,
    *args: Any,
    **kwargs: Any,
) -> LazyCoroResult[Any, DispatchError]:
    """
    Deferred invoke().

    Nothing is resolved until the result is awaited, so the rules in
    effect are those registered at await time.

    Example:
        pending = lazy_invoke(registry, "greet", "fr")
        registry.add_rule("greet", "fr", greet_fr_v2)
        await pending  # → Ok(greet_fr_v2("fr"))
    """
    async def _run() -> Result[Any, DispatchError]:
        return invoke(registry, name, *args, **kwargs)
    return LazyCoroResult(_run)


__all__ = ("from_result", "lazy_invoke")
