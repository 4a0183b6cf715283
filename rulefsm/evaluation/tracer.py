"""
Transition Tracer
=================

Traces machine activity for debugging and analysis.

Records are kept in memory for the caller to inspect or export; nothing is
written anywhere by the tracer itself.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TraceRecord:
    """A single trace record."""
    timestamp: datetime
    event_type: str
    data: Dict[str, Any]


@dataclass
class TransitionTracer:
    """
    Tracer for machine observability.

    Pass one to StateMachine(..., tracer=tracer) and every add_rule() and
    transition() call is recorded as an event:
    - rule_added / rule_rejected
    - transition / transition_denied

    With `max_records` set, only the newest records are kept.
    """
    name: str = "rulefsm"
    max_records: Optional[int] = None
    started_at: datetime = field(default_factory=_utcnow)
    records: List[TraceRecord] = field(default_factory=list)

    def add_event(self, event_type: str, **data) -> None:
        """Add an event to the trace."""
        self.records.append(TraceRecord(
            timestamp=_utcnow(),
            event_type=event_type,
            data=data,
        ))
        if self.max_records is not None and len(self.records) > self.max_records:
            del self.records[:len(self.records) - self.max_records]

    def clear(self) -> None:
        """Drop all records."""
        self.records.clear()

    def record_rule(self, rule, result) -> None:
        """Log a rule registration attempt."""
        if result.ok:
            self.add_event("rule_added", rule=repr(rule))
        else:
            self.add_event(
                "rule_rejected",
                rule=repr(rule),
                error=result.error.name,
                reason=result.reason,
            )

    def record_transition(self, from_state, to_state, args: Tuple[Any, ...], result) -> None:
        """Log a transition attempt."""
        data = {
            "from_state": str(from_state),
            "to_state": str(to_state),
            "args": [repr(a) for a in args],
        }
        if result.ok:
            self.add_event("transition", **data)
        else:
            self.add_event(
                "transition_denied",
                error=result.error.name,
                reason=result.reason,
                **data,
            )

    def events(self, event_type: str) -> List[TraceRecord]:
        """All records of one type, oldest first."""
        return [r for r in self.records if r.event_type == event_type]

    def summary(self) -> Dict[str, int]:
        """Count of records per event type."""
        return dict(Counter(r.event_type for r in self.records))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for export."""
        return {
            "name": self.name,
            "started_at": self.started_at.isoformat(),
            "records": [
                {
                    "timestamp": r.timestamp.isoformat(),
                    "event_type": r.event_type,
                    "data": r.data,
                }
                for r in self.records
            ],
        }
