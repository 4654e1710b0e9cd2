"""
Relevance resolver - blame the single most useful failing condition.

When a value fails a descriptor, several conditions usually fail at once.
-3 against "string OR positive integer" fails both "string" and "positive",
but only the latter makes a helpful message. The resolver walks the
condition graph and scores every alternative:

    - every condition whose predicate passes adds PASS_BONUS to its group,
      so the alternative closest to succeeding wins
    - every prerequisite level subtracts DEPTH_PENALTY, so among equally
      close alternatives the shallowest failure wins
    - within a group the first failure in iteration order is blamed

Conditions are shared by reference across parents, so each condition is
scored at most once per top-level call. The per-call ``visited`` map keys
conditions by identity and records whether each one held, which lets a
parent know its prerequisites failed even when the failing prerequisite was
scored earlier through another parent.

Usage:
    ```python
    from runtime_typecheck.conditions import catalog as Cond
    from runtime_typecheck.validation.resolver import find_failing

    condition = find_failing(-3, [Cond.string, [Cond.positive, Cond.integer]])
    condition is Cond.positive  # True
    ```
"""

import logging
import math
from typing import Any, Dict, Optional, Set, Tuple

from runtime_typecheck.conditions.types import (
    Condition,
    Descriptor,
    as_descriptor,
    normalize_condition_list,
)
from runtime_typecheck.validation.evaluator import evaluate

logger = logging.getLogger(__name__)

# Scoring weights. Diagnostics are pinned to these exact values.
PASS_BONUS = 10
DEPTH_PENALTY = 1

Visited = Dict[Condition, bool]


def find_failing(value: Any, descriptor: Descriptor) -> Optional[Condition]:
    """
    Find the failing condition that best explains why a value fails.

    Args:
        value: Value to check
        descriptor: Alternatives to check against

    Returns:
        Optional[Condition]: The blamed condition, or None if the value
        satisfies the descriptor
    """
    condition, _ = find_failing_alternative(value, descriptor)
    return condition


def find_failing_alternative(
    value: Any,
    descriptor: Descriptor,
) -> Tuple[Optional[Condition], Tuple[Condition, ...]]:
    """
    Like ``find_failing``, also returning the winning alternative's AND-group.

    Returns:
        Tuple: (blamed condition, its top-level AND-group), or (None, ())
        if the value satisfies the descriptor
    """
    if evaluate(value, descriptor):
        return None, ()

    score, condition, group = _score_descriptor(value, descriptor, {})
    logger.debug(f"Blamed {condition!r} with score {score}")
    return condition, group


def _score_descriptor(
    value: Any,
    descriptor: Descriptor,
    visited: Visited,
) -> Tuple[float, Optional[Condition], Tuple[Condition, ...]]:
    """
    Score every alternative and return the best one's (score, first failure, group).

    Returns (-inf, None, ()) when every condition was already visited.
    """
    best_score = -math.inf
    best_failure = None
    best_group: Tuple[Condition, ...] = ()
    chosen = False

    for condition_list in as_descriptor(descriptor):
        group = tuple(normalize_condition_list(condition_list))
        level_score = 0
        best_child_score = -math.inf
        first_failure = None

        for condition in group:
            if condition in visited:
                continue
            # A repeat visit through a cycle sees the condition as holding.
            visited[condition] = True

            child_score = 0
            child_failure = None
            prerequisites_hold = True
            if condition.has_prerequisites:
                child_score, child_failure, _ = _score_descriptor(
                    value, condition.conditions, visited
                )
                child_score -= DEPTH_PENALTY
                prerequisites_hold = _holds(condition.conditions, visited)
                if prerequisites_hold:
                    child_failure = None
                elif child_failure is None:
                    # Failed while scored through an earlier parent.
                    child_failure = _first_failed(condition.conditions, visited, set()) or condition

            passed = False
            if child_failure is None and prerequisites_hold:
                passed = bool(condition.predicate(value))
                if passed:
                    level_score += PASS_BONUS
                else:
                    child_failure = condition
            visited[condition] = prerequisites_hold and passed

            best_child_score = max(best_child_score, child_score)
            if first_failure is None:
                first_failure = child_failure

        total = best_child_score + level_score
        if not chosen or total > best_score:
            best_score = total
            best_failure = first_failure
            best_group = group
            chosen = True

    return best_score, best_failure, best_group


def _holds(descriptor: Descriptor, visited: Visited) -> bool:
    """Whether a fully visited descriptor holds, from the recorded outcomes."""
    return any(
        all(visited.get(condition, True) for condition in normalize_condition_list(condition_list))
        for condition_list in as_descriptor(descriptor)
    )


def _first_failed(descriptor: Descriptor, visited: Visited, seen: Set[Condition]) -> Optional[Condition]:
    """The first condition recorded as failing, followed down to its own failing prerequisite."""
    for condition_list in as_descriptor(descriptor):
        for condition in normalize_condition_list(condition_list):
            if condition in seen or visited.get(condition, True):
                continue
            seen.add(condition)
            if condition.has_prerequisites and not _holds(condition.conditions, visited):
                return _first_failed(condition.conditions, visited, seen) or condition
            return condition
    return None


def get_descriptor_pass_count(value: Any, descriptor: Descriptor) -> int:
    """
    Count the passing conditions inside a descriptor, recursively.

    Every condition is counted at most once, however many parents share it.
    A condition's own predicate only runs (and counts) when its
    prerequisites hold. This does not tell whether the descriptor as a whole
    holds.

    Args:
        value: Value to check
        descriptor: Alternatives to count over

    Returns:
        int: Number of passing conditions

    Example:
        ```python
        # positive and integer share the "number" prerequisite
        get_descriptor_pass_count(3, [[Cond.positive, Cond.integer]])   # 3
        get_descriptor_pass_count(-3, [[Cond.positive, Cond.integer]])  # 2
        ```
    """
    return _count_passing(value, descriptor, {})


def _count_passing(value: Any, descriptor: Descriptor, visited: Visited) -> int:
    count = 0
    for condition_list in as_descriptor(descriptor):
        for condition in normalize_condition_list(condition_list):
            if condition in visited:
                continue
            visited[condition] = True

            prerequisites_hold = True
            if condition.has_prerequisites:
                count += _count_passing(value, condition.conditions, visited)
                prerequisites_hold = _holds(condition.conditions, visited)

            passed = prerequisites_hold and bool(condition.predicate(value))
            visited[condition] = passed
            if passed:
                count += 1
    return count
