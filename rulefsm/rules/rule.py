"""
Transition Rules
================

Immutable decision objects for a single (from, to) state pair.

    Initial ─────────────► Backlog        SimpleTransitionRule
    Backlog ──[cond]─────► Progress       ConditionalTransitionRule

The set of rule kinds is closed: the machine accepts exactly these two.
"""

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Union

# Predicates receive the transition's positional arguments and must return
# False (not raise) when the arguments have the wrong shape.
Predicate = Callable[..., bool]


@dataclass(frozen=True)
class SimpleTransitionRule:
    """Always permits the move from `from_state` to `to_state`."""
    from_state: Hashable
    to_state: Hashable

    def valid(self, from_state: Hashable, to_state: Hashable, *args: Any) -> bool:
        """True if the pair matches. Arguments are ignored."""
        return from_state == self.from_state and to_state == self.to_state

    def __repr__(self) -> str:
        return f"{self.from_state} --> {self.to_state}"


@dataclass(frozen=True)
class ConditionalTransitionRule:
    """
    Permits the move only if `condition(*args)` holds.

    Example:
        rule = ConditionalTransitionRule("Backlog", "Progress", equal_integers)
        rule.valid("Backlog", "Progress", 10, 15)  # False
    """
    from_state: Hashable
    to_state: Hashable
    condition: Predicate

    def valid(self, from_state: Hashable, to_state: Hashable, *args: Any) -> bool:
        """True if the pair matches and the condition accepts `args`."""
        if from_state != self.from_state or to_state != self.to_state:
            return False
        return bool(self.condition(*args))

    def __repr__(self) -> str:
        name = getattr(self.condition, "__name__", "condition")
        return f"{self.from_state} --[{name}]--> {self.to_state}"


TransitionRule = Union[SimpleTransitionRule, ConditionalTransitionRule]
