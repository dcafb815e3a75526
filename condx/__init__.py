"""
CondX - Conditional eXpressions

An immutable, fluent alternative to chained if/elif/else: evaluate a value
against an ordered set of conditions and produce a transformed result, or a
default.
"""

from .action import ConditionalAction
from .conditional import ABSENT, NO_MATCH, Conditional, apply_if, of
from .exceptions import NullArgumentError

__all__ = [
    # Pipeline
    "Conditional",
    "ConditionalAction",
    # Factory functions
    "of",
    "apply_if",
    # Exceptions
    "NullArgumentError",
    # Sentinels
    "NO_MATCH",
    "ABSENT",
]
