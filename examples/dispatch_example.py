"""
Dispatch — keyed and predicate operations.

Instead of:
    if isinstance(shape, Square): ...
    elif isinstance(shape, Circle): ...

You write:
    area = defmulti(registry, "area", lambda s: type(s))
    area.on(Square, square_area).on(Circle, circle_area)
"""

import math

from kungfu import Ok, Error

import multimethods as M
from examples._infra import banner, Square, Circle, Triangle


registry = M.Registry(detail="examples")


# ═══════════════════════════════════════════════════════════════════════════════
# Keyed — dispatch_fn computes the key, literal keys select the handler
# ═══════════════════════════════════════════════════════════════════════════════

area = M.defmulti(registry, "area", lambda shape: type(shape))
area.on(Square, lambda s: s.side ** 2)
area.on(Circle, lambda c: math.pi * c.radius ** 2)


# ═══════════════════════════════════════════════════════════════════════════════
# Predicates — no dispatch_fn, last true predicate wins
# ═══════════════════════════════════════════════════════════════════════════════

size = M.defmulti(registry, "size")
size.default(lambda a: "small")
size.on(lambda a: a > 10, lambda a: "medium")
size.on(lambda a: a > 100, lambda a: "large")


def main() -> None:
    banner("Multimethods: Dispatch")

    for shape in (Square(3), Circle(2), Square(12), Triangle(3, 4)):
        print(f"\n{shape}:")
        match area.invoke(shape):
            case Ok(a):
                print(f"   → area {a:.2f}, {size(a)}")
            case Error(e):
                print(f"   → Error: {e}")

    print("\nOverride (last registration wins):")
    area.on(Square, lambda s: round(s.side ** 2))
    print(f"   → {area(Square(2.5))}")

    print("\nDone!")


if __name__ == "__main__":
    main()
