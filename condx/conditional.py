"""
CondX Conditional - Immutable First-Match Pipeline
==================================================

A Conditional wraps a subject value together with an ordered tuple of
ConditionalActions. Resolving it applies the action of the first condition
that holds, or falls back to a default:

    ```python
    label = (
        Conditional.of(order.total)
        .first_matching(
            apply_if(lambda t: t > 1000, lambda t: "large"),
            apply_if(lambda t: t > 100, lambda t: "medium"),
        )
        .map(str.upper)
        .or_else("SMALL")
    )
    ```

Pipeline construction:
- `of(value)` - start a pipeline, `value` may be None
- `first_matching(*actions)` - set the ordered actions (replaces, never appends)
- `map(func)` / `>>` - compose `func` after every action, lazily
- `flat_map(func)` - resolve now and continue with the Conditional `func` returns

Terminal operations (match-or-default):
- `or_else(default)`
- `or_else_get(supplier)`
- `or_else_throw(exception_supplier)`

A None subject never reaches a condition, it always takes the default path.
A matched action that returns None yields None; the default is only used
when nothing matched.
"""

import logging
from typing import Any, Callable, Generic, Tuple

from .action import ConditionalAction
from .exceptions import NullArgumentError, require_callable
from .types.common_types import (
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

logger = logging.getLogger(__name__)

# ============================================================================
# SENTINEL VALUES
# ============================================================================


class _Sentinel:
    """Named marker returned by `Conditional.resolve` instead of a result."""

    __slots__ = ("_name",)

    def __init__(self, name: str):
        self._name = name

    def __repr__(self):
        return self._name


NO_MATCH = _Sentinel("NO_MATCH")  # subject present, no condition held
ABSENT = _Sentinel("ABSENT")  # subject is None, no condition evaluated


def _unresolved(result: Any) -> bool:
    return result is NO_MATCH or result is ABSENT


# ============================================================================
# CONDITIONAL - The Pipeline
# ============================================================================


class Conditional(Generic[S, T]):
    """
    Immutable pipeline of condition/action pairs over one subject value.

    Every combinator returns a new Conditional; the receiver is never
    modified, so an instance can be resolved any number of times and from
    any thread.
    """

    __slots__ = ("_value", "_actions")

    def __init__(self, value: S = None, actions: Tuple[ConditionalAction, ...] = ()):
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_actions", tuple(actions))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Conditional is immutable, cannot set '{name}'")

    def __repr__(self) -> str:
        return f"Conditional(value={self._value!r}, actions={len(self._actions)})"

    @property
    def value(self) -> S:
        """The subject the pipeline is evaluated against."""
        return self._value

    @property
    def actions(self) -> Tuple[ConditionalAction, ...]:
        """The actions in priority order."""
        return self._actions

    # ------------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------------

    @classmethod
    def of(cls, value: S) -> "Conditional[S, S]":
        """Start a pipeline for ``value`` with no actions attached."""
        return cls(value, ())

    @classmethod
    def empty(cls) -> "Conditional[Any, Any]":
        """Pipeline with no subject and no actions; always resolves to its default."""
        return cls(None, ())

    @staticmethod
    def apply_if(
        condition: Predicate[S], action: ActionFunction[S, U]
    ) -> ConditionalAction[S, U]:
        """Bind ``condition`` to ``action``."""
        return ConditionalAction(condition, action)

    # ------------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------------

    def first_matching(
        self, *actions: ConditionalAction[S, U]
    ) -> "Conditional[S, U]":
        """
        Return a pipeline over the same subject with ``actions`` as its actions.

        Order is priority order. Actions attached by an earlier call are
        replaced, not extended. A single list or tuple of actions is accepted
        in place of separate arguments.
        """
        if len(actions) == 1 and isinstance(actions[0], (list, tuple)):
            actions = tuple(actions[0])
        for i, action in enumerate(actions):
            if action is None:
                raise NullArgumentError(f"action {i}")
            if not isinstance(action, ConditionalAction):
                raise TypeError(
                    f"Action {i} must be a ConditionalAction, got {type(action).__name__}"
                )
        return Conditional(self._value, actions)

    def map(self, func: TransformFunction[T, U]) -> "Conditional[S, U]":
        """
        Transform the result of whichever action matches.

        Lazy: nothing is evaluated until a terminal operation runs, and
        ``func`` never runs when no action matches.
        """
        require_callable(func, "func")
        return Conditional(
            self._value, tuple(action.and_(func) for action in self._actions)
        )

    def __rshift__(self, func: TransformFunction[T, U]) -> "Conditional[S, U]":
        """Support >> operator."""
        return self.map(func)

    def flat_map(
        self, func: Callable[[T], "Conditional[T, U]"]
    ) -> "Conditional[T, U]":
        """
        Resolve now and continue with the pipeline ``func`` builds from the result.

        The conditions of the returned pipeline are evaluated against the
        mapped value, so the receiver has to be resolved first. When no action
        matched, the empty pipeline is returned.
        """
        require_callable(func, "func")
        result = self.map(func).or_else_get(Conditional.empty)
        if not isinstance(result, Conditional):
            raise TypeError(
                f"flat_map function must return a Conditional, got {type(result).__name__}"
            )
        return result

    # ------------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------------

    def resolve(self) -> Any:
        """
        Run match-or-default without a default.

        Returns the result of the first matching action (which may be None),
        ABSENT when the subject is None, or NO_MATCH when no condition held.
        """
        if self._value is None:
            logger.debug(
                "Conditional subject is None, skipping %d action(s)", len(self._actions)
            )
            return ABSENT

        for action in self._actions:
            if action.matches(self._value):
                return action(self._value)

        logger.debug("No action matched %r", self._value)
        return NO_MATCH

    def or_else(self, default: T) -> T:
        """Resolve, returning ``default`` when nothing matched."""
        result = self.resolve()
        return default if _unresolved(result) else result

    def or_else_get(self, supplier: Supplier[T]) -> T:
        """Resolve, calling ``supplier`` only when nothing matched."""
        require_callable(supplier, "supplier")
        result = self.resolve()
        return supplier() if _unresolved(result) else result

    def or_else_throw(self, exception_supplier: ExceptionSupplier[E]) -> T:
        """Resolve, raising ``exception_supplier()`` when nothing matched."""
        require_callable(exception_supplier, "exception_supplier")
        result = self.resolve()
        if _unresolved(result):
            raise exception_supplier()
        return result


# Module-level factories
of = Conditional.of
apply_if = Conditional.apply_if
