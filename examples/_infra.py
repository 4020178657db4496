"""Shared infrastructure for examples."""

from __future__ import annotations

from dataclasses import dataclass


# Domain
@dataclass(frozen=True, slots=True)
class Square:
    side: float


@dataclass(frozen=True, slots=True)
class Circle:
    radius: float


@dataclass(frozen=True, slots=True)
class Triangle:
    base: float
    height: float


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")
