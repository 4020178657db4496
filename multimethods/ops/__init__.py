"""
Ops — operation handles (capability pattern).

    from multimethods import ops as O

    classify = O.defmulti(registry, "classify")
    classify.on(lambda n: n > 10, lambda n: "high").default(lambda n: "low")

    classify(5)    # → "low"
    classify(20)   # → "high"
"""

from multimethods.ops._multi import Multi, defmulti

__all__ = ("Multi", "defmulti")
