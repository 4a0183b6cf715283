"""
Machine Results
===============

Failures are values. Every mutating call on the machine returns a
MachineResult that the caller inspects:

```python
result = machine.transition("Progress", 10, 10)
if result.error == MachineError.TRANSITION_NOT_ALLOWED:
    ...
```

Callers that would rather have an exception use `result.raise_for_error()`.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Hashable, Optional


class MachineError(Enum):
    """Why an operation on the machine failed."""
    STATE_NOT_FOUND = auto()         # Referenced state is not registered
    ALREADY_FINALIZED = auto()       # Rule added after the first transition
    TRANSITION_NOT_ALLOWED = auto()  # No rule for the pair, or the rule denied


class TransitionError(Exception):
    """Exception form of a failed MachineResult."""

    def __init__(self, error: MachineError, state: Any = None, reason: str = ""):
        self.error = error
        self.state = state
        self.reason = reason
        super().__init__(reason or error.name)


@dataclass(frozen=True)
class MachineResult:
    """Result of add_rule() or transition()."""
    ok: bool
    error: Optional[MachineError] = None
    state: Optional[Hashable] = None  # The offending state for STATE_NOT_FOUND
    reason: str = ""

    @classmethod
    def success(cls) -> "MachineResult":
        return cls(ok=True)

    @classmethod
    def state_not_found(cls, state: Hashable) -> "MachineResult":
        return cls(
            ok=False,
            error=MachineError.STATE_NOT_FOUND,
            state=state,
            reason=f"state: {state}, state not found",
        )

    @classmethod
    def already_finalized(cls) -> "MachineResult":
        return cls(
            ok=False,
            error=MachineError.ALREADY_FINALIZED,
            reason="rules must be defined before finalization",
        )

    @classmethod
    def not_allowed(cls, from_state: Hashable, to_state: Hashable) -> "MachineResult":
        return cls(
            ok=False,
            error=MachineError.TRANSITION_NOT_ALLOWED,
            reason=f"transition not allowed: {from_state} -> {to_state}",
        )

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        """Raise TransitionError if this result is a failure."""
        if not self.ok:
            raise TransitionError(self.error, self.state, self.reason)
