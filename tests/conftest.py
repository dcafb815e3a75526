"""
Shared pytest fixtures and configuration for CondX tests.
"""

import pytest

from condx import Conditional, apply_if


def is_even(n):
    return n % 2 == 0


def times_two(n):
    return n * 2


@pytest.fixture
def even_doubler():
    """Factory for a pipeline that doubles even numbers."""

    def build(number):
        return Conditional.of(number).first_matching(apply_if(is_even, times_two))

    return build


@pytest.fixture
def call_log():
    """List that recorded predicates and actions append to."""
    return []


@pytest.fixture
def recorded(call_log):
    """Wrap a callable so every call is appended to ``call_log`` under ``name``."""

    def wrap(name, func):
        def recorder(*args):
            call_log.append(name)
            return func(*args)

        return recorder

    return wrap
