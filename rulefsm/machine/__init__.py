"""
machine - State Machine Layer
=============================

Question this layer answers:
"Where are we, and may we move?"

The machine enforces:
- A fixed set of valid states
- Rules registered only before the first transition
- Moves only when the first matching rule agrees

```python
result = machine.transition(target, *args)
if not result:
    print(result.error)
```

Failures come back as MachineResult values, never as exceptions.
"""

from .state_machine import StateMachine, MachinePhase
from .errors import MachineError, MachineResult, TransitionError

__all__ = [
    "StateMachine",
    "MachinePhase",
    "MachineError",
    "MachineResult",
    "TransitionError",
]
