"""
evaluation - Observability Layer
================================

Question this layer answers:
"What did the machine just do, and why?"

```python
tracer = TransitionTracer()
machine = StateMachine("Initial", "Backlog", tracer=tracer)
```
"""

from .tracer import TransitionTracer, TraceRecord

__all__ = ["TransitionTracer", "TraceRecord"]
