"""
Scope — temporary operations with guaranteed cleanup.

    from multimethods import scope as S

    with S.local(registry, "classify") as classify:
        classify.on(lambda n: n < 0, lambda n: "negative").default(lambda n: "other")
        classify(-1)  # → "negative"
    # "classify" is gone here, even if the block raised
"""

from multimethods.scope._local import LocalOperation, local, define_local

__all__ = ("LocalOperation", "local", "define_local")
