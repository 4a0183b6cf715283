"""
Rule-Gated State Machine
========================

Tracks one current state out of a fixed set and moves only when a
registered rule allows it.

Lifecycle:

    ┌──────────────┐   first transition()   ┌──────────────┐
    │ CONFIGURING  │ ─────────────────────► │ OPERATIONAL  │
    │ add_rule ok  │   (success or not)     │ add_rule no  │
    └──────────────┘                        └──────────────┘

Transition algorithm:
1. Finalize (always, before anything else)
2. Target == current state → success, nothing else checked
3. Unknown target → STATE_NOT_FOUND
4. First rule registered for (current, target) decides;
   no rule → TRANSITION_NOT_ALLOWED

Only the FIRST rule for a given pair is ever consulted. A later rule for the
same pair is unreachable, even if the first one denies.
"""

from enum import Enum, auto
from typing import Any, Hashable, List, Optional, FrozenSet, Tuple

from ..rules import SimpleTransitionRule, ConditionalTransitionRule, TransitionRule
from .errors import MachineResult


class MachinePhase(Enum):
    """Whether the machine still accepts rules."""
    CONFIGURING = auto()  # Rules may be added
    OPERATIONAL = auto()  # A transition was attempted; rules are locked


class StateMachine:
    """
    Finite state machine gated by transition rules.

    Not thread-safe: a caller sharing one machine between threads must
    guard every call with a single lock.

    Example:
        sm = StateMachine("Initial", "Backlog", "Progress")
        sm.add_rule(SimpleTransitionRule("Initial", "Backlog"))
        sm.transition("Backlog")
    """

    def __init__(self, initial: Hashable, *states: Hashable, tracer=None):
        self._state = initial
        self._states = frozenset((initial, *states))
        self._rules: List[TransitionRule] = []
        self._phase = MachinePhase.CONFIGURING
        self._tracer = tracer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> Hashable:
        """Current state."""
        return self._state

    def get_state(self) -> Hashable:
        """Get current state."""
        return self._state

    @property
    def states(self) -> FrozenSet[Hashable]:
        """All valid states, the initial one included."""
        return self._states

    @property
    def rules(self) -> Tuple[TransitionRule, ...]:
        """Registered rules in registration order."""
        return tuple(self._rules)

    @property
    def phase(self) -> MachinePhase:
        return self._phase

    def is_final(self) -> bool:
        """True once any transition has been attempted."""
        return self._phase == MachinePhase.OPERATIONAL

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def add_rule(self, rule: TransitionRule) -> MachineResult:
        """
        Register a rule.

        Fails with ALREADY_FINALIZED after the first transition, or with
        STATE_NOT_FOUND if an endpoint is unknown (from_state is checked
        first). A failed call leaves the rule list untouched.
        """
        if not isinstance(rule, (SimpleTransitionRule, ConditionalTransitionRule)):
            raise TypeError(f"Can only add transition rules, got {type(rule).__name__}")

        if self._phase == MachinePhase.OPERATIONAL:
            result = MachineResult.already_finalized()
        elif rule.from_state not in self._states:
            result = MachineResult.state_not_found(rule.from_state)
        elif rule.to_state not in self._states:
            result = MachineResult.state_not_found(rule.to_state)
        else:
            self._rules.append(rule)
            result = MachineResult.success()

        if self._tracer is not None:
            self._tracer.record_rule(rule, result)
        return result

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def transition(self, to: Hashable, *args: Any) -> MachineResult:
        """
        Attempt to move to `to`, passing `args` to a conditional rule.

        Finalizes the machine whatever the outcome.
        """
        self._phase = MachinePhase.OPERATIONAL

        from_state = self._state
        result = self._evaluate(to, args)
        if result.ok:
            self._state = to

        if self._tracer is not None:
            self._tracer.record_transition(from_state, to, args, result)
        return result

    def can_transition(self, to: Hashable, *args: Any) -> bool:
        """Dry run of transition(): does not finalize and does not move."""
        return self._evaluate(to, args).ok

    def _evaluate(self, to: Hashable, args: Tuple[Any, ...]) -> MachineResult:
        if to == self._state:
            return MachineResult.success()

        if to not in self._states:
            return MachineResult.state_not_found(to)

        rule = self._find_rule(self._state, to)
        if rule is None or not rule.valid(self._state, to, *args):
            return MachineResult.not_allowed(self._state, to)

        return MachineResult.success()

    def _find_rule(self, from_state: Hashable, to: Hashable) -> Optional[TransitionRule]:
        """First registered rule for the pair, or None."""
        for rule in self._rules:
            if rule.from_state == from_state and rule.to_state == to:
                return rule
        return None

    def check_invariants(self) -> bool:
        """
        Check that machine invariants hold.

        These should NEVER be violated.
        """
        # Current state is always registered
        assert self._state in self._states

        # Every rule endpoint is registered
        for rule in self._rules:
            assert rule.from_state in self._states
            assert rule.to_state in self._states

        return True

    def __repr__(self) -> str:
        return (
            f"StateMachine(state={self._state!r}, states={len(self._states)}, "
            f"rules={len(self._rules)}, phase={self._phase.name})"
        )
