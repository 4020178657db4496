"""
Rules — matchers paired with handlers.

    from multimethods import rules as R

    R.rule(R.when(lambda n: n > 10), high)   # predicate
    R.rule("fr", greet_fr)                   # literal key
    R.rule(R.DEFAULT, fallback)              # fallback
"""

from multimethods.rules._types import (
    Predicate,
    LiteralKey,
    DefaultMarker,
    DEFAULT,
    Matcher,
    Handler,
    Rule,
)
from multimethods.rules._build import (
    when,
    key,
    bound,
    as_matcher,
    as_handler,
    rule,
)

__all__ = (
    "Predicate",
    "LiteralKey",
    "DefaultMarker",
    "DEFAULT",
    "Matcher",
    "Handler",
    "Rule",
    "when",
    "key",
    "bound",
    "as_matcher",
    "as_handler",
    "rule",
)
