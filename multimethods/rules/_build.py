"""
Rule constructors and shorthand coercion.
"""

from __future__ import annotations

from multimethods._types import PredicateFn, HandlerFn
from multimethods.rules._types import (
    Predicate,
    LiteralKey,
    DefaultMarker,
    Matcher,
    Handler,
    Rule,
)

# ═══════════════════════════════════════════════════════════════════════════════
# Explicit Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def when(test: PredicateFn) -> Predicate:
    """
    Predicate matcher.

    Example:
        classify.on(M.when(lambda n: n > 10), high)
    """
    return Predicate(test)


def key(value: object) -> LiteralKey:
    """
    Literal-key matcher.

    Use it for keys that are themselves callable and would otherwise be
    taken for predicates:

        handlers.on(M.key(len), describe_len)
    """
    return LiteralKey(value)


def bound(receiver: object, fn: HandlerFn) -> Handler:
    """
    Handler with a captured receiver, passed as the first argument.

    Example:
        area.on(Square, M.bound(renderer, Renderer.square))
        area(Square(2))  # → Renderer.square(renderer, Square(2))
    """
    return Handler(fn, (receiver,))


# ═══════════════════════════════════════════════════════════════════════════════
# Coercion
# ═══════════════════════════════════════════════════════════════════════════════


def as_matcher(value: object) -> Matcher:
    """
    Turn registration shorthand into a Matcher.

    - Matcher instances (including DEFAULT) pass through.
    - Classes are literal keys, so dispatch on type(x) works.
    - Other callables are predicates.
    - Everything else is a literal key.
    """
    if isinstance(value, (Predicate, LiteralKey, DefaultMarker)):
        return value
    if isinstance(value, type):
        return LiteralKey(value)
    if callable(value):
        return Predicate(value)
    return LiteralKey(value)


def as_handler(value: Handler | HandlerFn) -> Handler:
    """Wrap a plain callable into a Handler."""
    if isinstance(value, Handler):
        return value
    if not callable(value):
        raise TypeError(f"Handler must be callable, got {type(value).__name__}")
    return Handler(value)


def rule(matcher: object, handler: Handler | HandlerFn) -> Rule:
    """Build a Rule from shorthand."""
    return Rule(as_matcher(matcher), as_handler(handler))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("when", "key", "bound", "as_matcher", "as_handler", "rule")
