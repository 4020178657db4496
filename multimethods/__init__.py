"""
multimethods — runtime multiple dispatch over explicit registries.

    import multimethods as M

    registry = M.Registry()

    greet = M.defmulti(registry, "greet", lambda lang: lang)
    greet.on("en", lambda lang: "hello").on("fr", lambda lang: "bonjour")
    greet("fr")   # → "bonjour"

    classify = M.defmulti(registry, "classify")
    classify.on(lambda n: n > 10, lambda n: "high").default(lambda n: "low")
    classify(20)  # → "high"

Priority: when several rules match, the LAST registered one wins.
"""

from multimethods import rules
from multimethods import registry
from multimethods import dispatch
from multimethods import scope
from multimethods import ops
from multimethods import lift
from multimethods._types import (
    Result,
    Ok,
    Error,
    DispatchErrorKind,
    DispatchError,
    DispatchFailure,
)
from multimethods.rules import (
    Predicate,
    LiteralKey,
    DefaultMarker,
    DEFAULT,
    Handler,
    Rule,
    when,
    key,
    bound,
    as_matcher,
    as_handler,
)
from multimethods.registry import Registry, OperationTable
from multimethods.dispatch import resolve, invoke, call
from multimethods.scope import LocalOperation, local, define_local
from multimethods.ops import Multi, defmulti

__version__ = "0.1.0"

__all__ = (
    "rules",
    "registry",
    "dispatch",
    "scope",
    "ops",
    "lift",
    "Result",
    "Ok",
    "Error",
    "DispatchErrorKind",
    "DispatchError",
    "DispatchFailure",
    "Predicate",
    "LiteralKey",
    "DefaultMarker",
    "DEFAULT",
    "Handler",
    "Rule",
    "when",
    "key",
    "bound",
    "as_matcher",
    "as_handler",
    "Registry",
    "OperationTable",
    "resolve",
    "invoke",
    "call",
    "LocalOperation",
    "local",
    "define_local",
    "Multi",
    "defmulti",
)
