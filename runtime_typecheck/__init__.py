"""
runtime_typecheck: Runtime value checks with readable diagnostics

Values are checked against descriptors: OR-lists of AND-groups of named
conditions. Conditions may depend on other conditions, so "positive"
builds on "number" and only ever sees numbers. When a check fails, the
library blames the single failing condition that best explains the failure
and composes a sentence from every condition's message fragments.

Key Features:
    - Composable conditions sharing prerequisites by reference
    - "Expected ..., got ..." messages built from partial fragments
    - Relevance ranking that blames the alternative closest to passing
    - A catalog of common conditions and a small CLI

Quick Start:
    ```python
    from runtime_typecheck import Cond, assert_and_raise, check

    check(12, [[Cond.positive, Cond.integer]])  # True

    assert_and_raise(-3, [[Cond.positive, Cond.integer], Cond.string])
    # TypeCheckError: Expected positive integer OR string, got a negative number or 0
    ```

Architecture:
    1. Classifier: Tag values (array, null, number, ...) for messages
    2. Evaluator: OR-of-AND evaluation with prerequisite gating
    3. Resolver: Score alternatives, blame the most relevant failure
    4. Composer: Merge fragments into expected / actual sentences
"""

__version__ = "0.3.0"

from runtime_typecheck.api import assert_and_raise, check  # noqa: F401
from runtime_typecheck.conditions import catalog as Cond  # noqa: F401
from runtime_typecheck.conditions.types import (  # noqa: F401
    Condition,
    FailureInfo,
    Fragment,
)
from runtime_typecheck.errors import (  # noqa: F401
    ConditionDefinitionError,
    TypeCheckError,
    format_type_check_error,
)
from runtime_typecheck.utils.classifier import (  # noqa: F401
    UNDEFINED,
    article,
    classify,
    enumerate_words,
)
from runtime_typecheck.validation import (  # noqa: F401
    find_failing,
    find_failing_alternative,
    get_descriptor_pass_count,
    get_message_expected,
    get_message_is,
    get_message_is_iterated,
    merge_expected,
    render,
)

__all__ = [
    "check",
    "assert_and_raise",
    "Cond",
    "Condition",
    "FailureInfo",
    "Fragment",
    "ConditionDefinitionError",
    "TypeCheckError",
    "format_type_check_error",
    "UNDEFINED",
    "article",
    "classify",
    "enumerate_words",
    "find_failing",
    "find_failing_alternative",
    "get_descriptor_pass_count",
    "get_message_expected",
    "get_message_is",
    "get_message_is_iterated",
    "merge_expected",
    "render",
]
