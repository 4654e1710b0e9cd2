"""
Message composer - turn a condition graph into readable sentences.

Expected messages are built from every condition's ``should_be`` fragment,
independent of the checked value:

    1. Siblings of an AND-group merge horizontally:
       [positive, integer] -> "positive" + "integer" -> "positive integer"
    2. Prerequisites merge vertically into their parent. The shallow
       condition's type wins, so "integer" is not overwritten by the
       "number" it depends on.
    3. A prerequisite with several alternatives expands the sentence into
       one entry per alternative:
       non-empty (array OR string) -> "non-empty array OR non-empty string"
    4. Identical entries are dropped.

The "is" message comes from the condition blamed by the relevance resolver.

Usage:
    ```python
    from runtime_typecheck.conditions import catalog as Cond
    from runtime_typecheck.validation.composer import get_message_expected, get_message_is

    descriptor = [[Cond.positive, Cond.integer], Cond.string]
    get_message_expected(descriptor)   # "positive integer OR string"
    get_message_is(-3, descriptor)     # "a negative number or 0"
    ```
"""

import re
from typing import Any, Iterable, List

from runtime_typecheck.conditions.types import (
    Condition,
    Descriptor,
    FailureInfo,
    Fragment,
    as_descriptor,
    normalize_condition_list,
)
from runtime_typecheck.utils.classifier import article, classify
from runtime_typecheck.validation.evaluator import evaluate
from runtime_typecheck.validation.resolver import find_failing_alternative

# Rendered in place of the type when no condition contributed one.
TYPE_PLACEHOLDER = "value"
ALTERNATIVE_SEPARATOR = " OR "

_THAT_CLAUSE = re.compile(r"^that\b")


def merge_expected(descriptor: Descriptor) -> List[Fragment]:
    """
    Merge the ``should_be`` fragments of a descriptor.

    Args:
        descriptor: Alternatives to describe

    Returns:
        List[Fragment]: One fragment per distinct expected shape, in order
        of first appearance

    Example:
        ```python
        merge_expected([[Cond.nonempty, Cond.length(3)]])
        # [Fragment(before=('non-empty',), type='array', after=('of length 3',)),
        #  Fragment(before=('non-empty',), type='string', after=('of length 3',))]
        ```
    """
    fragments = []
    for condition_list in as_descriptor(descriptor):
        fragments.extend(_merge_group(normalize_condition_list(condition_list)))
    return _deduplicate(fragments)


def _merge_group(group: List[Condition]) -> List[Fragment]:
    """Merge one AND-group, expanding branching prerequisites."""
    if not group:
        return [Fragment()]

    accumulator = group[0].expected(Fragment())
    for condition in group[1:]:
        accumulator = accumulator.merge(condition.expected(accumulator))

    branches = []
    for condition in group:
        if not condition.has_prerequisites:
            continue
        deep = merge_expected(condition.conditions)
        if len(deep) == 1:
            accumulator = accumulator.merge(deep[0])
        elif len(deep) > 1:
            branches.append(deep)

    if not branches:
        return [accumulator]
    return [accumulator.merge(branch) for deep in branches for branch in deep]


def _deduplicate(fragments: Iterable[Fragment]) -> List[Fragment]:
    seen = set()
    unique = []
    for fragment in fragments:
        if fragment not in seen:
            seen.add(fragment)
            unique.append(fragment)
    return unique


def render(fragment: Fragment) -> str:
    """
    Render a fragment as "[before] [type] [after]".

    "that" clauses are moved to the end and chained with "and", so
    ("that is divisible by 5", "that is greater than 25") reads
    "that is divisible by 5 and is greater than 25".

    Args:
        fragment: Fragment to render

    Returns:
        str: The rendered phrase
    """
    text = ""
    if fragment.before:
        text += ", ".join(fragment.before) + " "
    text += fragment.type or TYPE_PLACEHOLDER

    if fragment.after:
        plain = [item for item in fragment.after if not _THAT_CLAUSE.match(item)]
        clauses = [item for item in fragment.after if _THAT_CLAUSE.match(item)]
        chained = clauses[:1] + [_THAT_CLAUSE.sub("and", item, count=1) for item in clauses[1:]]
        text += " " + " ".join(plain + chained)

    return text


def get_message_expected(descriptor: Descriptor) -> str:
    """
    Describe every alternative of a descriptor.

    Example:
        ```python
        get_message_expected([[Cond.number, Cond.positive], Cond.keywords("foobar")])
        # 'positive number OR the keyword "foobar"'
        ```
    """
    return ALTERNATIVE_SEPARATOR.join(render(fragment) for fragment in merge_expected(descriptor))


def get_message_is(value: Any, descriptor: Descriptor) -> str:
    """
    Describe a value through its most relevant failing condition.

    Args:
        value: Value to describe
        descriptor: Alternatives the value was checked against

    Returns:
        str: The blamed condition's ``is_`` message, or "" if the value
        satisfies the descriptor
    """
    condition, group = find_failing_alternative(value, descriptor)
    if condition is None:
        return ""

    value_type = classify(value)
    info = FailureInfo(value=value, type=value_type, article=article(value_type), conditions=group)
    return condition.describe(info)


def get_message_is_iterated(values: Iterable[Any], descriptor: Descriptor) -> str:
    """
    Return ``get_message_is`` for the first item that fails the descriptor.

    Used by container conditions (array-of-X, object-of-X) to describe their
    offending element. Returns "" if every item passes.
    """
    for item in values:
        if not evaluate(item, descriptor):
            return get_message_is(item, descriptor)
    return ""
