"""
rules - Transition Rule Layer
=============================

Question this layer answers:
"Is this particular move permitted?"

A rule is bound to exactly one (from, to) pair:

```python
rule = ConditionalTransitionRule("Backlog", "Progress", equal_integers)
rule.valid("Backlog", "Progress", 10, 10)   # True
```

Two kinds, and only two:
- SimpleTransitionRule: always permits its pair
- ConditionalTransitionRule: permits its pair only if the predicate agrees

This layer does NOT:
- Know which states exist (that's the machine)
- Track the current state (that's the machine)
- Report errors (a denied rule just returns False)
"""

from .rule import (
    SimpleTransitionRule,
    ConditionalTransitionRule,
    TransitionRule,
    Predicate,
)
from .predicates import equal_integers

__all__ = [
    "SimpleTransitionRule",
    "ConditionalTransitionRule",
    "TransitionRule",
    "Predicate",
    "equal_integers",
]
