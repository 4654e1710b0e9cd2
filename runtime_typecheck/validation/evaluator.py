"""
Assertion evaluator - decide whether a value satisfies a descriptor.

A descriptor is an OR of AND-groups. Every condition in a group may declare
its own prerequisite descriptor, which is evaluated recursively against the
same value before any predicate of the group runs. A predicate is therefore
never called with a value its prerequisites reject.

Usage:
    ```python
    from runtime_typecheck.conditions import catalog as Cond
    from runtime_typecheck.validation.evaluator import evaluate

    evaluate(3, [[Cond.positive, Cond.integer]])   # True
    evaluate(-3, [[Cond.positive, Cond.integer]])  # False
    evaluate("x", [Cond.number, Cond.string])      # True
    ```
"""

from typing import Any

from runtime_typecheck.conditions.types import (
    ConditionList,
    Descriptor,
    as_descriptor,
    normalize_condition_list,
)


def evaluate(value: Any, descriptor: Descriptor) -> bool:
    """
    Check a value against a descriptor.

    Args:
        value: Value to check
        descriptor: Alternatives to check against (OR of AND-groups)

    Returns:
        bool: True if any alternative holds, False otherwise (also for an
        empty descriptor)

    Note:
        Exceptions raised by predicates propagate unchanged.
    """
    return any(
        _evaluate_condition_list(value, condition_list)
        for condition_list in as_descriptor(descriptor)
    )


def _evaluate_condition_list(value: Any, condition_list: ConditionList) -> bool:
    """Check one AND-group. An empty group holds vacuously."""
    group = normalize_condition_list(condition_list)

    # Prerequisites first, per condition, so no predicate sees a value of
    # the wrong shape.
    for condition in group:
        if condition.has_prerequisites and not evaluate(value, condition.conditions):
            return False

    return all(condition.predicate(value) for condition in group)
