"""
Local operations — define, use, and always remove.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType

from multimethods._types import DispatchFn
from multimethods.ops import Multi
from multimethods.registry import Registry

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# LocalOperation — Scope Guard
# ═══════════════════════════════════════════════════════════════════════════════


class LocalOperation:
    """
    Guard for a temporary operation.

    __enter__ defines the operation; __exit__ removes it on every exit
    path, including when the block raises. Exceptions are not suppressed.

    The operation occupies registry[name] for the duration; a permanent
    operation with the same name is replaced and not restored.
    """

    __slots__ = ("_registry", "_name", "_dispatch_fn")

    def __init__(
        self,
        registry: Registry,
        name: str,
        dispatch_fn: DispatchFn | None = None,
    ) -> None:
        self._registry = registry
        self._name = name
        self._dispatch_fn = dispatch_fn

    def __enter__(self) -> Multi:
        self._registry.define(self._name, self._dispatch_fn)
        return Multi(self._registry, self._name)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._registry.remove(self._name)
        if exc_type is not None:
            logger.debug(
                "%s: local %r torn down after %s",
                self._registry.detail, self._name, exc_type.__name__,
            )


def local(
    registry: Registry,
    name: str,
    dispatch_fn: DispatchFn | None = None,
) -> LocalOperation:
    """
    Temporary operation as a context manager.

    Example:
        with local(registry, "fmt", lambda v: type(v)) as fmt:
            fmt.on(int, str).on(float, lambda v: f"{v:.2f}")
            fmt(1.5)  # → "1.50"

        "fmt" in registry  # → False
    """
    return LocalOperation(registry, name, dispatch_fn)


# ═══════════════════════════════════════════════════════════════════════════════
# define_local() — Run a Body Against a Temporary Operation
# ═══════════════════════════════════════════════════════════════════════════════


def define_local[T](
    registry: Registry,
    name: str,
    body: Callable[[Multi], T],
    *,
    dispatch_fn: DispatchFn | None = None,
) -> T:
    """
    Define name, run body(handle), remove name, return body's value.

    Removal happens even when body raises; the exception propagates.

    Example:
        def body(op: Multi) -> str:
            op.on("en", lambda lang: "hello")
            return op("en")

        define_local(registry, "greet", body, dispatch_fn=lambda lang: lang)  # → "hello"
    """
    with local(registry, name, dispatch_fn) as op:
        return body(op)


__all__ = ("LocalOperation", "local", "define_local")
