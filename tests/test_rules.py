"""
Tests for Rules Layer
=====================
"""

import dataclasses
import sys
from pathlib import Path

import pytest

# Setup path so the package imports without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rulefsm.rules import (
    SimpleTransitionRule,
    ConditionalTransitionRule,
    equal_integers,
)


class TestSimpleRule:
    """Test the unconditional rule."""

    def test_exposes_endpoints(self):
        """Rule should report its from/to states."""
        rule = SimpleTransitionRule("Initial", "Backlog")
        assert rule.from_state == "Initial"
        assert rule.to_state == "Backlog"

    def test_matching_pair_is_valid(self):
        """Matching pair is always permitted."""
        rule = SimpleTransitionRule("Initial", "Backlog")
        assert rule.valid("Initial", "Backlog") is True

    def test_arguments_are_ignored(self):
        """Extra arguments don't change the outcome."""
        rule = SimpleTransitionRule("Initial", "Backlog")
        assert rule.valid("Initial", "Backlog", 1, "x", None) is True

    def test_other_pairs_are_invalid(self):
        """Any other pair is refused."""
        rule = SimpleTransitionRule("Initial", "Backlog")
        assert rule.valid("Backlog", "Initial") is False
        assert rule.valid("Initial", "Progress") is False

    def test_is_immutable(self):
        """Rules cannot be changed after construction."""
        rule = SimpleTransitionRule("Initial", "Backlog")
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.to_state = "Progress"

    def test_repr(self):
        assert repr(SimpleTransitionRule("Initial", "Backlog")) == "Initial --> Backlog"


class TestConditionalRule:
    """Test the predicate-gated rule."""

    def test_condition_true_permits(self):
        """Matching pair and passing condition is permitted."""
        rule = ConditionalTransitionRule("Backlog", "Progress", equal_integers)
        assert rule.valid("Backlog", "Progress", 10, 10) is True

    def test_condition_false_denies(self):
        """Failing condition denies the move."""
        rule = ConditionalTransitionRule("Backlog", "Progress", equal_integers)
        assert rule.valid("Backlog", "Progress", 10, 15) is False

    def test_wrong_pair_skips_condition(self):
        """Condition is not consulted for a different pair."""
        calls = []

        def condition(*args):
            calls.append(args)
            return True

        rule = ConditionalTransitionRule("Backlog", "Progress", condition)
        assert rule.valid("Initial", "Progress") is False
        assert calls == []

    def test_arguments_are_forwarded(self):
        """Condition receives the transition arguments unchanged."""
        seen = []

        def condition(*args):
            seen.append(args)
            return True

        rule = ConditionalTransitionRule("A", "B", condition)
        rule.valid("A", "B", 1, "two", [3])
        assert seen == [(1, "two", [3])]

    def test_repr_names_condition(self):
        rule = ConditionalTransitionRule("Backlog", "Progress", equal_integers)
        assert repr(rule) == "Backlog --[equal_integers]--> Progress"


class TestEqualIntegers:
    """Test the bundled predicate."""

    def test_equal_integers(self):
        assert equal_integers(10, 10) is True

    def test_unequal_integers(self):
        assert equal_integers(10, 15) is False

    def test_wrong_arity(self):
        """Anything but exactly two arguments is refused."""
        assert equal_integers() is False
        assert equal_integers(10) is False
        assert equal_integers(10, 10, 10) is False

    def test_float_is_not_integer(self):
        assert equal_integers(10.0, 10) is False
        assert equal_integers(10, 10.0) is False

    def test_bool_is_not_integer(self):
        assert equal_integers(True, 1) is False

    def test_strings_refused(self):
        assert equal_integers("10", "10") is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
