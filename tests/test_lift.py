"""Unit tests for lifting dispatch into kungfu lazy computations."""
from __future__ import annotations

import asyncio

from multimethods import DispatchErrorKind, Error, Ok, Registry, defmulti
from multimethods.lift import from_result, lazy_invoke


class TestLazyInvoke:
    """lazy_invoke / Multi.lazy."""

    def test_resolves_at_await_time(self, registry: Registry) -> None:
        registry.define("greet", lambda lang: lang)
        registry.add_rule("greet", "fr", lambda lang: "bonjour")

        pending = lazy_invoke(registry, "greet", "fr")
        registry.add_rule("greet", "fr", lambda lang: "salut")

        async def main() -> object:
            return await pending

        match asyncio.run(main()):
            case Ok(value):
                assert value == "salut"
            case Error(e):
                raise AssertionError(f"unexpected dispatch error: {e}")

    def test_not_called_until_awaited(self, registry: Registry) -> None:
        calls: list[str] = []
        greet = defmulti(registry, "greet", lambda lang: lang)
        greet.on("en", lambda lang: calls.append(lang))

        pending = greet.lazy("en")

        assert calls == []

        async def main() -> object:
            return await pending

        asyncio.run(main())

        assert calls == ["en"]

    def test_unknown_operation_is_error(self, registry: Registry) -> None:
        async def main() -> object:
            return await lazy_invoke(registry, "missing")

        match asyncio.run(main()):
            case Error(e):
                assert e.kind is DispatchErrorKind.OPERATION_NOT_FOUND
            case Ok(value):
                raise AssertionError(f"unexpected success: {value!r}")


class TestFromResult:
    """from_result."""

    def test_lifts_ok(self) -> None:
        async def main() -> object:
            return await from_result(Ok(3))

        match asyncio.run(main()):
            case Ok(value):
                assert value == 3
            case Error(e):
                raise AssertionError(f"unexpected error: {e}")
