"""
Resolution — pick one handler for a call.

Rules are scanned in registration order and the scan never stops
early: the LAST matching rule wins. Register broad rules first and
specific overrides after them.
"""

from __future__ import annotations

import logging
from typing import Any

from kungfu import Result, Ok, Error

from multimethods._types import DispatchError, DispatchErrorKind, DispatchFailure, not_found
from multimethods.registry import OperationTable, Registry
from multimethods.rules import Handler, Predicate, LiteralKey, DefaultMarker

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# resolve() — Scan One Table
# ═══════════════════════════════════════════════════════════════════════════════


def resolve(table: OperationTable, *args: Any, **kwargs: Any) -> Result[Handler, DispatchError]:
    """
    Select the handler for a call against a table snapshot.

    1. dispatch_fn (if any) computes the key once.
    2. Predicate: conflict if the table is keyed, else test the args.
       LiteralKey: key == value (needs a dispatch_fn).
       DEFAULT: remembered as fallback, never matches directly.
    3. Last match wins; otherwise the fallback; otherwise Error.
    """
    keyed = table.dispatch_fn is not None
    dispatch_key: object = None
    if table.dispatch_fn is not None:
        dispatch_key = table.dispatch_fn(*args, **kwargs)

    selected: Handler | None = None
    fallback: Handler | None = None

    for index, rule in enumerate(table.rules):
        match rule.matcher:
            case Predicate(test):
                if keyed:
                    return Error(DispatchError(
                        DispatchErrorKind.CONFLICTING_DISPATCH_MODE,
                        table.name,
                        f"rule #{index + 1} is a predicate but {table.name!r} "
                        "already dispatches through dispatch_fn",
                    ))
                matched = bool(test(*args, **kwargs))
            case LiteralKey(value):
                if not keyed:
                    return Error(DispatchError(
                        DispatchErrorKind.MISSING_DISPATCH_KEY,
                        table.name,
                        f"rule #{index + 1} compares against key {value!r} "
                        f"but {table.name!r} has no dispatch_fn",
                    ))
                matched = dispatch_key == value
            case DefaultMarker():
                fallback = rule.handler
                continue
            case other:
                raise TypeError(f"Unsupported matcher: {other!r}")

        if matched:
            selected = rule.handler

    destination = selected if selected is not None else fallback
    if destination is None:
        return Error(DispatchError(
            DispatchErrorKind.NO_MATCHING_HANDLER,
            table.name,
            f"no matching handler for {table.name!r}"
            + (f" (key={dispatch_key!r})" if keyed else ""),
        ))

    logger.debug(
        "%r → %s%s",
        table.name,
        destination.name,
        " (fallback)" if selected is None else "",
    )
    return Ok(destination)


# ═══════════════════════════════════════════════════════════════════════════════
# invoke() — Lookup + Resolve + Call
# ═══════════════════════════════════════════════════════════════════════════════


def invoke(registry: Registry, name: str, *args: Any, **kwargs: Any) -> Result[Any, DispatchError]:
    """
    Dispatch a call through the registry.

    Dispatch problems come back as Error(DispatchError); exceptions from
    the dispatch function, predicates or the handler itself propagate.

    Example:
        match invoke(registry, "greet", "fr"):
            case Ok(text):
                print(text)
            case Error(e):
                print(f"dispatch failed: {e}")
    """
    table = registry.get(name)
    if table is None:
        return Error(not_found(name))

    match resolve(table, *args, **kwargs):
        case Ok(handler):
            return Ok(handler(*args, **kwargs))
        case Error(e):
            return Error(e)


# ═══════════════════════════════════════════════════════════════════════════════
# call() — Raising Variant
# ═══════════════════════════════════════════════════════════════════════════════


def call(registry: Registry, name: str, *args: Any, **kwargs: Any) -> Any:
    """Like invoke(), but returns the raw value or raises DispatchFailure."""
    match invoke(registry, name, *args, **kwargs):
        case Ok(value):
            return value
        case Error(e):
            raise DispatchFailure(e)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("resolve", "invoke", "call")
