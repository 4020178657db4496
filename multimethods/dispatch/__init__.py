"""
Dispatch — resolve and call.

    from multimethods import dispatch as D

    D.invoke(registry, "greet", "fr")   # → Ok(...) | Error(DispatchError)
    D.call(registry, "greet", "fr")     # → value, or raises DispatchFailure
"""

from multimethods.dispatch._resolve import resolve, invoke, call

__all__ = ("resolve", "invoke", "call")
