"""
CondX Common Types - Shared Type Definitions
============================================

Shared type variables and callable aliases used by the action and pipeline
modules. Keeping them here avoids circular imports between the two.
"""

from typing import Callable, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

S = TypeVar("S")  # Subject type, fixed for a whole pipeline
T = TypeVar("T")  # Current result type
U = TypeVar("U")  # Result type after a map / flat_map step
E = TypeVar("E", bound=BaseException)

# ============================================================================
# CALLABLE TYPES
# ============================================================================

Predicate = Callable[[S], bool]
ActionFunction = Callable[[S], T]
TransformFunction = Callable[[T], U]
Supplier = Callable[[], T]
ExceptionSupplier = Callable[[], E]
