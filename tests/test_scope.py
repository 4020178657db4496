"""Unit tests for temporary (scoped) operations."""
from __future__ import annotations

import pytest

from multimethods import (
    DEFAULT,
    DispatchErrorKind,
    Error,
    Multi,
    Ok,
    Registry,
    define_local,
    invoke,
    local,
)


def assert_not_found(registry: Registry, name: str) -> None:
    match invoke(registry, name, "en"):
        case Error(e):
            assert e.kind is DispatchErrorKind.OPERATION_NOT_FOUND
        case Ok(value):
            raise AssertionError(f"{name!r} still dispatches: {value!r}")


# =============================================================================
# define_local
# =============================================================================


class TestDefineLocal:
    """define_local(registry, name, body, dispatch_fn=...)."""

    def test_returns_body_value(self, registry: Registry) -> None:
        def body(op: Multi) -> str:
            op.on("en", lambda lang: "hello").on("fr", lambda lang: "bonjour")
            return op("fr")

        result = define_local(registry, "greet", body, dispatch_fn=lambda lang: lang)

        assert result == "bonjour"
        assert_not_found(registry, "greet")

    def test_body_can_use_registry_by_name(self, registry: Registry) -> None:
        def body(op: Multi) -> object:
            registry.add_rule("classify", lambda n: n > 10, lambda n: "high")
            registry.add_rule("classify", DEFAULT, lambda n: "low")
            return invoke(registry, "classify", 20)

        result = define_local(registry, "classify", body)

        assert isinstance(result, Ok)
        assert "classify" not in registry

    def test_removed_when_body_raises(self, registry: Registry) -> None:
        class BodyFailed(Exception):
            pass

        def body(op: Multi) -> None:
            op.on("en", lambda lang: "hello")
            raise BodyFailed("nope")

        with pytest.raises(BodyFailed, match="nope"):
            define_local(registry, "greet", body, dispatch_fn=lambda lang: lang)

        assert_not_found(registry, "greet")

    def test_shadowed_permanent_operation_is_removed(self, registry: Registry) -> None:
        registry.define("greet", lambda lang: lang)
        registry.add_rule("greet", "en", lambda lang: "permanent")

        inside = define_local(
            registry,
            "greet",
            lambda op: op.default(lambda lang: "temporary")("en"),
            dispatch_fn=lambda lang: lang,
        )

        assert inside == "temporary"
        assert_not_found(registry, "greet")

    def test_other_operations_untouched(self, registry: Registry) -> None:
        registry.define("keep")

        define_local(registry, "temp", lambda op: None)

        assert registry.names() == ("keep",)


# =============================================================================
# local() context manager
# =============================================================================


class TestLocalGuard:
    """with local(registry, name) as op: ..."""

    def test_defined_inside_removed_after(self, registry: Registry) -> None:
        with local(registry, "fmt", lambda value: type(value)) as fmt:
            fmt.on(int, str).on(float, lambda v: f"{v:.2f}")

            assert "fmt" in registry
            assert fmt(1.5) == "1.50"
            assert fmt(3) == "3"

        assert "fmt" not in registry
        assert not fmt.defined

    def test_exception_not_suppressed(self, registry: Registry) -> None:
        with pytest.raises(KeyError):
            with local(registry, "fmt") as fmt:
                fmt.default(lambda v: {}[v])
                fmt("missing")

        assert "fmt" not in registry

    def test_sequential_scopes_start_empty(self, registry: Registry) -> None:
        with local(registry, "op") as op:
            op.default(lambda: "first")

        with local(registry, "op") as op:
            assert op.rules == ()
