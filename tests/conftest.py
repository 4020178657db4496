"""Shared fixtures for multimethods tests."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from multimethods import Registry


@pytest.fixture
def registry() -> Registry:
    """Fresh, isolated registry per test."""
    return Registry(detail="test")


@pytest.fixture
def calls() -> list[tuple[str, tuple[Any, ...]]]:
    """Call log shared by the recorder fixture."""
    return []


@pytest.fixture
def recorder(calls: list[tuple[str, tuple[Any, ...]]]) -> Callable[[str], Callable[..., str]]:
    """Build handlers that log their label + args and return the label."""

    def make(label: str) -> Callable[..., str]:
        def handler(*args: Any) -> str:
            calls.append((label, args))
            return label

        handler.__qualname__ = f"handler_{label}"
        return handler

    return make
