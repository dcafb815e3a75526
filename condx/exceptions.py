"""Exceptions raised by CondX."""

from typing import Any

# ============================================================================
# EXCEPTIONS
# ============================================================================


class NullArgumentError(ValueError):
    """Raised when a required callable argument is None."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} cannot be None")


def require_callable(value: Any, argument: str) -> Any:
    """Return ``value`` if it is callable, raise otherwise."""
    if value is None:
        raise NullArgumentError(argument)
    if not callable(value):
        raise TypeError(f"{argument} must be callable, got {type(value).__name__}")
    return value
