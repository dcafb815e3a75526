"""
CondX ConditionalAction - Predicate Bound to a Transformation
=============================================================

A ConditionalAction pairs one condition over the subject type with one
function producing the result type. It is the unit a Conditional pipeline
scans when it resolves.

Actions are immutable and can be shared between any number of pipelines:

    ```python
    double_even = ConditionalAction(lambda n: n % 2 == 0, lambda n: n * 2)
    describe = double_even >> (lambda n: f"doubled to {n}")
    ```
"""

from dataclasses import dataclass
from typing import Callable, Generic

from .exceptions import require_callable
from .types.common_types import ActionFunction, Predicate, S, T, TransformFunction, U


def _compose(first: Callable[[S], T], second: Callable[[T], U]) -> Callable[[S], U]:
    """Return ``second(first(x))`` as a single function."""

    def composed(value: S) -> U:
        return second(first(value))

    return composed


@dataclass(frozen=True, slots=True)
class ConditionalAction(Generic[S, T]):
    """
    Immutable condition/action pair.

    Both callables are validated when the action is built.
    """

    condition: Predicate[S]
    action: ActionFunction[S, T]

    def __post_init__(self) -> None:
        require_callable(self.condition, "condition")
        require_callable(self.action, "action")

    def matches(self, value: S) -> bool:
        """Evaluate the condition against ``value``."""
        return bool(self.condition(value))

    def __call__(self, value: S) -> T:
        return self.action(value)

    def and_(self, extra_action: TransformFunction[T, U]) -> "ConditionalAction[S, U]":
        """
        Compose ``extra_action`` after this action.

        The condition is kept as is; the new action applies the original one
        and then ``extra_action`` to its result.
        """
        require_callable(extra_action, "extra_action")
        return ConditionalAction(self.condition, _compose(self.action, extra_action))

    def __rshift__(
        self, extra_action: TransformFunction[T, U]
    ) -> "ConditionalAction[S, U]":
        """Support >> operator."""
        return self.and_(extra_action)
