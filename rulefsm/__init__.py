"""
rulefsm
=======

A small embeddable finite state machine gated by transition rules.

Layers:
- rules:      "Is this particular move permitted?"
- machine:    "Where are we, and may we move?"
- evaluation: "What did the machine just do?"
- runtime:    configuration and the demo shell

```python
from rulefsm import StateMachine, SimpleTransitionRule

sm = StateMachine("Initial", "Backlog")
sm.add_rule(SimpleTransitionRule("Initial", "Backlog"))
sm.transition("Backlog")
```
"""

from .rules import (
    SimpleTransitionRule,
    ConditionalTransitionRule,
    TransitionRule,
    equal_integers,
)
from .machine import (
    StateMachine,
    MachinePhase,
    MachineError,
    MachineResult,
    TransitionError,
)
from .evaluation import TransitionTracer

__version__ = "0.1.0"
__all__ = [
    "SimpleTransitionRule",
    "ConditionalTransitionRule",
    "TransitionRule",
    "equal_integers",
    "StateMachine",
    "MachinePhase",
    "MachineError",
    "MachineResult",
    "TransitionError",
    "TransitionTracer",
]
