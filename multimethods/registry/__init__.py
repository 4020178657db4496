"""
Registry — named operations and their rules.

    from multimethods import Registry

    registry = Registry()
    registry.define("classify")
    registry.add_rule("classify", lambda n: n > 10, high)
    registry.add_rule("classify", DEFAULT, low)
"""

from multimethods.registry._types import OperationTable
from multimethods.registry._registry import Registry

__all__ = ("OperationTable", "Registry")
