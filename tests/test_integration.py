"""
Integration Test: Reference Walkthrough
=======================================
Drives the Initial -> Backlog -> Progress workflow end to end, both built by
hand and built from configuration.
"""

import sys
from pathlib import Path

import pytest

# Setup path so the package imports without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rulefsm import (
    StateMachine,
    SimpleTransitionRule,
    ConditionalTransitionRule,
    MachineError,
    equal_integers,
)
from rulefsm.runtime import load_config, build_machine, run_walkthrough


# (target, args, expected error or None, expected state afterwards)
EXPECTED = [
    ("Canceled", (), MachineError.STATE_NOT_FOUND, "Initial"),
    ("Progress", (), MachineError.TRANSITION_NOT_ALLOWED, "Initial"),
    ("Backlog", (), None, "Backlog"),
    ("Progress", (), MachineError.TRANSITION_NOT_ALLOWED, "Backlog"),
    ("Progress", (10, 15), MachineError.TRANSITION_NOT_ALLOWED, "Backlog"),
    ("Progress", (10.0, 10), MachineError.TRANSITION_NOT_ALLOWED, "Backlog"),
    ("Progress", (10, 10), None, "Progress"),
]


class TestReferenceWalkthrough:
    """The documented walkthrough, step by step."""

    def test_hand_built_machine(self):
        sm = StateMachine("Initial", "Backlog", "Progress")
        assert sm.add_rule(SimpleTransitionRule("Initial", "Backlog")).ok
        assert sm.add_rule(ConditionalTransitionRule("Backlog", "Progress", equal_integers)).ok
        assert sm.state == "Initial"

        for target, args, error, state in EXPECTED:
            result = sm.transition(target, *args)
            assert result.error == error, f"{target}{args}"
            assert sm.state == state

        assert sm.is_final() is True

    def test_default_config_walkthrough(self):
        """The default configuration reproduces the same outcomes."""
        config = load_config()
        sm = build_machine(config)

        outcomes = run_walkthrough(sm, config.walkthrough, verbose=False)

        assert len(outcomes) == len(EXPECTED)
        for outcome, (target, args, error, state) in zip(outcomes, EXPECTED):
            assert outcome.step.to == target
            assert tuple(outcome.step.args) == args
            assert outcome.result.error == error
            assert outcome.state == state

    def test_shipped_workflow_file(self):
        """workflow.yaml at the project root matches the defaults."""
        config = load_config(str(project_root / "workflow.yaml"))
        sm = build_machine(config)

        outcomes = run_walkthrough(sm, config.walkthrough, verbose=False)

        assert [o.result.error for o in outcomes] == [e[2] for e in EXPECTED]
        assert sm.state == "Progress"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
