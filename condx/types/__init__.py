"""
CondX Types
===========

Type variables and callable aliases shared across CondX.
"""

from .common_types import (
    ActionFunction,
    E,
    ExceptionSupplier,
    Predicate,
    S,
    Supplier,
    T,
    TransformFunction,
    U,
)

__all__ = [
    "S",
    "T",
    "U",
    "E",
    "Predicate",
    "ActionFunction",
    "TransformFunction",
    "Supplier",
    "ExceptionSupplier",
]
