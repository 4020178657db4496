"""
Multi — a first-class handle on one registered operation.

Hosts keep a Multi instead of growing methods on themselves:

    @dataclass
    class Shapes:
        area: Multi

    shapes = Shapes(area=defmulti(registry, "area", lambda s: type(s)))
    shapes.area.on(Square, square_area).on(Circle, circle_area)
    shapes.area(Square(2))  # → 4
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from kungfu import Result, Ok, Error, LazyCoroResult

from multimethods._types import DispatchFn, DispatchError, DispatchFailure, HandlerFn, not_defined
from multimethods.dispatch import invoke
from multimethods.lift import lazy_invoke
from multimethods.registry import Registry
from multimethods.rules import DEFAULT, Handler, Rule


@dataclass(slots=True, frozen=True)
class Multi:
    """
    Handle on registry[name].

    Holds no rules itself: every call reads the registry's current
    table, so rules added through the registry are seen here too.
    """

    registry: Registry
    name: str

    @classmethod
    def of(cls, registry: Registry, name: str) -> Multi:
        """Wrap an operation that already exists."""
        if name not in registry:
            raise DispatchFailure(not_defined(name))
        return cls(registry, name)

    # ───────────────────────────────────────────────────────────────────────────
    # Registration
    # ───────────────────────────────────────────────────────────────────────────

    def on(self, matcher: object, handler: Handler | HandlerFn) -> Multi:
        """Register handler for matcher. Later registrations win."""
        match self.registry.add_rule(self.name, matcher, handler):
            case Ok(_):
                return self
            case Error(e):
                raise DispatchFailure(e)

    def default(self, handler: Handler | HandlerFn) -> Multi:
        """Register the fallback handler."""
        return self.on(DEFAULT, handler)

    def method[F: Callable[..., Any]](self, matcher: object) -> Callable[[F], F]:
        """
        Decorator form of .on().

        Example:
            @greet.method("fr")
            def greet_fr(lang: str) -> str:
                return "bonjour"
        """
        def register(fn: F) -> F:
            self.on(matcher, fn)
            return fn
        return register

    # ───────────────────────────────────────────────────────────────────────────
    # Invocation
    # ───────────────────────────────────────────────────────────────────────────

    def invoke(self, *args: Any, **kwargs: Any) -> Result[Any, DispatchError]:
        """Dispatch and return Ok(value) | Error(DispatchError)."""
        return invoke(self.registry, self.name, *args, **kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch like a plain function; raises DispatchFailure."""
        match self.invoke(*args, **kwargs):
            case Ok(value):
                return value
            case Error(e):
                raise DispatchFailure(e)

    def lazy(self, *args: Any, **kwargs: Any) -> LazyCoroResult[Any, DispatchError]:
        """Dispatch when awaited."""
        return lazy_invoke(self.registry, self.name, *args, **kwargs)

    # ───────────────────────────────────────────────────────────────────────────
    # Introspection
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def defined(self) -> bool:
        return self.name in self.registry

    @property
    def rules(self) -> tuple[Rule, ...]:
        match self.registry.lookup(self.name):
            case Ok(table):
                return table.rules
            case Error(e):
                raise DispatchFailure(e)


def defmulti(
    registry: Registry,
    name: str,
    dispatch_fn: DispatchFn | None = None,
) -> Multi:
    """
    Define (or redefine) an operation and return its handle.

    Example:
        greet = defmulti(registry, "greet", lambda lang: lang)
        greet.on("en", lambda lang: "hello").on("fr", lambda lang: "bonjour")
        greet("fr")  # → "bonjour"
    """
    registry.define(name, dispatch_fn)
    return Multi(registry, name)


__all__ = ("Multi", "defmulti")
