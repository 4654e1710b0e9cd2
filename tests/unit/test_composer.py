"""
Unit tests for the message composer.
"""

import pytest
from runtime_typecheck.conditions import Condition, FailureInfo, Fragment
from runtime_typecheck.conditions import catalog as Cond
from runtime_typecheck.validation import (
    get_message_expected,
    get_message_is,
    get_message_is_iterated,
    merge_expected,
    render,
)


class TestRender:
    """Test fragment rendering."""

    def test_that_clauses_are_chained(self):
        """Test the second "that" clause is rewritten to "and"."""
        fragment = Fragment(
            before=["positive"],
            type="integer",
            after=["that is divisible by 5", "that is greater than 25"],
        )

        assert render(fragment) == "positive integer that is divisible by 5 and is greater than 25"

    def test_that_clauses_sort_last(self):
        """Test plain after items come before "that" clauses."""
        fragment = Fragment(
            type="number",
            after=["that is even", "of the interval [1, 5]", "that is odd"],
        )

        assert render(fragment) == "number of the interval [1, 5] that is even and is odd"

    def test_before_items_are_comma_joined(self):
        """Test several before items are separated by commas."""
        fragment = Fragment(before=["non-empty", "sorted"], type="array")

        assert render(fragment) == "non-empty, sorted array"

    def test_missing_type_uses_placeholder(self):
        """Test a fragment without type renders the placeholder."""
        assert render(Fragment()) == "value"
        assert render(Fragment(after=["of length 3"])) == "value of length 3"

    def test_type_only(self):
        """Test a bare type renders without extra spaces."""
        assert render(Fragment(type="string")) == "string"


class TestMergeExpected:
    """Test fragment merging along the condition graph."""

    def test_siblings_merge_horizontally(self):
        """Test before and type of siblings combine."""
        fragments = merge_expected([[Cond.positive, Cond.integer]])

        assert fragments == [Fragment(before=["positive"], type="integer")]

    def test_shallow_type_wins_over_prerequisite(self):
        """Test a prerequisite's type does not overwrite its parent's."""
        assert merge_expected([Cond.integer]) == [Fragment(type="integer")]

    def test_prerequisite_type_fills_in(self):
        """Test a parent without type inherits its prerequisite's type."""
        assert merge_expected([Cond.positive]) == [Fragment(before=["positive"], type="number")]

    def test_branching_prerequisite_expands(self):
        """Test a prerequisite with alternatives yields one fragment each."""
        fragments = merge_expected([Cond.nonempty])

        assert fragments == [
            Fragment(before=["non-empty"], type="array"),
            Fragment(before=["non-empty"], type="string"),
        ]

    def test_identical_alternatives_deduplicated(self):
        """Test the same alternative twice yields one fragment."""
        assert len(merge_expected([[Cond.positive, Cond.integer], [Cond.positive, Cond.integer]])) == 1
        assert len(merge_expected([Cond.string, Cond.string])) == 1

    def test_expansions_deduplicated(self):
        """Test two branching siblings don't duplicate entries."""
        fragments = merge_expected([[Cond.nonempty, Cond.length(3)]])

        assert fragments == [
            Fragment(before=["non-empty"], type="array", after=["of length 3"]),
            Fragment(before=["non-empty"], type="string", after=["of length 3"]),
        ]

    def test_computed_fragment_receives_running_state(self):
        """Test callable should_be sees the fragment merged so far."""
        widget = Condition(predicate=lambda v: True, should_be=Fragment(type="widget"))
        shiny = Condition(
            predicate=lambda v: True,
            should_be=lambda state: Fragment(after=[f"as shiny as any {state.type}"]),
        )

        assert merge_expected([[widget, shiny]]) == [
            Fragment(type="widget", after=["as shiny as any widget"])
        ]

    def test_empty_group(self):
        """Test an empty AND-group yields an empty fragment."""
        assert merge_expected([[]]) == [Fragment()]


class TestMessages:
    """Test expected / actual message composition."""

    def test_expected_message(self):
        """Test alternatives are joined with OR."""
        descriptor = [[Cond.positive, Cond.integer], Cond.string]

        assert get_message_expected(descriptor) == "positive integer OR string"

    def test_expected_message_with_branches(self):
        """Test branching prerequisites read as separate alternatives."""
        assert get_message_expected([Cond.nonempty]) == "non-empty array OR non-empty string"

    def test_expected_message_empty_descriptor(self):
        """Test an empty descriptor describes nothing."""
        assert get_message_expected([]) == ""

    def test_is_message_literal(self):
        """Test a literal is_ is returned verbatim."""
        descriptor = [[Cond.positive, Cond.integer], Cond.string]

        assert get_message_is(-3, descriptor) == "a negative number or 0"

    def test_is_message_callable(self):
        """Test a callable is_ receives value, tag and article."""
        assert get_message_is([], [Cond.nonempty]) == "an empty array"
        assert get_message_is("x", [Cond.number]) == "string"

    def test_is_message_failure_info(self):
        """Test the FailureInfo handed to callable is_."""
        received = []
        cond = Condition(
            predicate=lambda v: False,
            is_=lambda info: received.append(info) or "nope",
        )

        assert get_message_is([1], [cond]) == "nope"
        assert received == [FailureInfo(value=[1], type="array", article="an", conditions=(cond,))]

    def test_is_message_receives_failing_alternative(self):
        """Test FailureInfo.conditions is the AND-group the blame came from."""
        received = []
        tagged = Condition(
            predicate=lambda v: v > 100,
            should_be=Fragment(after=["that is huge"]),
            is_=lambda info: received.append(info.conditions) or "a small number",
            conditions=[Cond.number],
        )

        assert get_message_is(5, [Cond.string, [Cond.integer, tagged]]) == "a small number"
        assert received == [(Cond.integer, tagged)]

    def test_is_message_for_passing_value(self):
        """Test a passing value produces an empty message."""
        assert get_message_is(3, [[Cond.positive, Cond.integer]]) == ""

    def test_is_message_errors_propagate(self):
        """Test exceptions from is_ callables are not swallowed."""
        cond = Condition(predicate=lambda v: False, is_=lambda info: info.value["missing"])

        with pytest.raises(KeyError):
            get_message_is({}, [cond])

    def test_is_message_iterated(self):
        """Test the first failing item is described."""
        descriptor = [Cond.positive]

        assert get_message_is_iterated([1, 2, -3, "x"], descriptor) == "a negative number or 0"
        assert get_message_is_iterated(["x", -3], descriptor) == "string"
        assert get_message_is_iterated([1, 2], descriptor) == ""

    def test_messages_are_stable(self):
        """Test repeated composition yields identical strings."""
        descriptor = [[Cond.divisible_by(5), Cond.greater_than(25)]]

        expected = {get_message_expected(descriptor) for _ in range(3)}
        actual = {get_message_is(26, descriptor) for _ in range(3)}

        assert expected == {"number that is divisible by 5 and is greater than 25"}
        assert actual == {"a number not divisible by 5"}
