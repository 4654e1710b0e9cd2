"""
Unit tests for the assertion evaluator.
"""

import pytest
from runtime_typecheck.conditions import Condition, Fragment
from runtime_typecheck.conditions import catalog as Cond
from runtime_typecheck.validation import evaluate


def make(predicate, conditions=None, name=None):
    """Build a condition with placeholder messages."""
    return Condition(
        predicate=predicate,
        should_be=Fragment(type=name or "thing"),
        is_="something else",
        conditions=conditions,
        name=name,
    )


def explode(value):
    raise AssertionError(f"predicate must not run for {value!r}")


class TestDescriptorSemantics:
    """Test OR-of-AND evaluation."""

    def test_empty_descriptor_never_asserts(self):
        """Test a descriptor without alternatives is always False."""
        assert evaluate(3, []) is False
        assert evaluate(None, []) is False

    def test_empty_group_vacuously_asserts(self):
        """Test an AND-group without conditions holds."""
        assert evaluate(3, [[]]) is True

    def test_any_alternative_suffices(self):
        """Test alternatives are OR-ed."""
        assert evaluate("foo", [Cond.number, Cond.string]) is True
        assert evaluate(3, [Cond.number, Cond.string]) is True
        assert evaluate(None, [Cond.number, Cond.string]) is False

    def test_group_requires_every_condition(self):
        """Test conditions of a group are AND-ed."""
        descriptor = [[Cond.positive, Cond.integer]]

        assert evaluate(3, descriptor) is True
        assert evaluate(3.5, descriptor) is False
        assert evaluate(-3, descriptor) is False

    def test_single_condition_and_group_are_equivalent(self):
        """Test a bare condition normalizes to a one-element group."""
        assert evaluate(3, [Cond.positive]) == evaluate(3, [[Cond.positive]])
        assert evaluate(-3, [Cond.positive]) == evaluate(-3, [[Cond.positive]])

    def test_bare_condition_as_descriptor(self):
        """Test a Condition passed as the descriptor itself."""
        assert evaluate(3, Cond.number) is True
        assert evaluate("3", Cond.number) is False

    def test_short_circuits_on_first_passing_alternative(self):
        """Test later alternatives are not evaluated once one holds."""
        assert evaluate(3, [Cond.number, make(explode)]) is True


class TestPrerequisites:
    """Test nested prerequisite descriptors."""

    def test_prerequisites_gate_predicate(self):
        """Test a predicate never runs when its prerequisites fail."""
        guarded = make(explode, conditions=[Cond.number])

        assert evaluate("not a number", [guarded]) is False
        assert evaluate(None, [[Cond.string, guarded]]) is False

    def test_group_prerequisites_checked_before_any_predicate(self):
        """Test all prerequisites of a group run before its predicates."""
        calls = []
        first = make(lambda v: calls.append(v) or True)
        second = make(lambda v: True, conditions=[Cond.string])

        assert evaluate(3, [[first, second]]) is False
        assert calls == []

    def test_prerequisites_see_the_same_value(self):
        """Test prerequisites receive the untransformed value."""
        seen = []
        inner = make(lambda v: seen.append(v) or True)
        outer = make(lambda v: seen.append(v) or True, conditions=[inner])
        value = {"key": [1, 2]}

        assert evaluate(value, [outer]) is True
        assert seen == [value, value]
        assert all(item is value for item in seen)

    def test_prerequisite_alternatives(self):
        """Test prerequisites are themselves OR-of-AND."""
        sized = make(lambda v: len(v) == 1, conditions=[Cond.array, Cond.string])

        assert evaluate([1], [sized]) is True
        assert evaluate("a", [sized]) is True
        assert evaluate([1, 2], [sized]) is False
        assert evaluate("", [sized]) is False
        assert evaluate(True, [sized]) is False
        assert evaluate(None, [sized]) is False

    def test_nested_prerequisites(self):
        """Test prerequisites of prerequisites are honoured."""
        even = make(lambda v: v % 2 == 0, conditions=[Cond.integer])

        assert evaluate(4, [even]) is True
        assert evaluate(3, [even]) is False
        assert evaluate(4.5, [even]) is False
        assert evaluate("4", [even]) is False

    def test_empty_prerequisites_mean_no_gating(self):
        """Test an explicitly empty prerequisite list behaves like none."""
        empty = make(lambda v: v == 1, conditions=[])
        absent = make(lambda v: v == 1)

        assert empty.has_prerequisites is False
        for value in (1, 2, "x", None):
            assert evaluate(value, [empty]) == evaluate(value, [absent])

    def test_predicate_errors_propagate(self):
        """Test exceptions from predicates are not swallowed."""
        broken = make(lambda v: 1 / 0)

        with pytest.raises(ZeroDivisionError):
            evaluate(3, [broken])

    def test_repeated_evaluation_is_stable(self):
        """Test evaluation keeps no state between calls."""
        descriptor = [[Cond.positive, Cond.integer], Cond.string]

        results = [evaluate(-3, descriptor) for _ in range(3)]

        assert results == [False, False, False]
