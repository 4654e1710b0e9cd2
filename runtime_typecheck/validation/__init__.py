"""
Validation layer module.

This module checks values against descriptors and explains failures.

Components:
    - evaluator: OR-of-AND evaluation with prerequisite gating
    - resolver: Weighted search for the most relevant failing condition
    - composer: Expected / actual sentence composition

Validation Flow:
    1. Evaluate the value against every alternative (evaluator)
    2. On failure, describe all alternatives from their fragments (composer)
    3. Blame the failing condition closest to passing (resolver)
    4. Describe the value through that condition (composer)

Example:
    ```python
    from runtime_typecheck.conditions import catalog as Cond
    from runtime_typecheck.validation import evaluate, get_message_expected, get_message_is

    descriptor = [[Cond.divisible_by(5), Cond.greater_than(25)]]
    if not evaluate(26, descriptor):
        print(f"Expected {get_message_expected(descriptor)}, got {get_message_is(26, descriptor)}")
        # Expected number that is divisible by 5 and is greater than 25,
        # got a number not divisible by 5
    ```
"""

from runtime_typecheck.validation.evaluator import evaluate
from runtime_typecheck.validation.resolver import (
    DEPTH_PENALTY,
    PASS_BONUS,
    find_failing,
    find_failing_alternative,
    get_descriptor_pass_count,
)
from runtime_typecheck.validation.composer import (
    get_message_expected,
    get_message_is,
    get_message_is_iterated,
    merge_expected,
    render,
)

__all__ = [
    "evaluate",
    "find_failing",
    "find_failing_alternative",
    "get_descriptor_pass_count",
    "PASS_BONUS",
    "DEPTH_PENALTY",
    "merge_expected",
    "render",
    "get_message_expected",
    "get_message_is",
    "get_message_is_iterated",
]
