"""
Reusable predicates for ConditionalTransitionRule.

Predicates are plain functions handed to a rule at construction time.
"""

from typing import Any


def equal_integers(*args: Any) -> bool:
    """
    True for exactly two integer arguments that are equal.

    Floats and bools are not integers here: (10.0, 10) and (True, 1) are
    both rejected.
    """
    if len(args) != 2:
        return False

    a, b = args
    for value in (a, b):
        if not isinstance(value, int) or isinstance(value, bool):
            return False

    return a == b
