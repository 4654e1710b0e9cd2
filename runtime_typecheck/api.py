"""
High-level Python API for runtime_typecheck.

This module provides the main user-facing entry points: a boolean check and
a raising assertion with a diagnostic message.
"""

import logging
from typing import Any, Union

from runtime_typecheck.conditions.types import Condition, Descriptor
from runtime_typecheck.errors import TypeCheckError
from runtime_typecheck.validation.composer import get_message_expected, get_message_is
from runtime_typecheck.validation.evaluator import evaluate

logger = logging.getLogger(__name__)


def check(value: Any, descriptor: Union[Descriptor, Condition]) -> bool:
    """
    Check a value against a descriptor.

    Args:
        value: Value to check
        descriptor: Alternatives to accept. Each item is a Condition or a
            list of Conditions that must all hold.

    Returns:
        bool: True if any alternative holds

    Example:
        ```python
        check(3, [[Cond.positive, Cond.integer]])    # True
        check("3", [[Cond.positive, Cond.integer]])  # False
        ```
    """
    return evaluate(value, descriptor)


def assert_and_raise(value: Any, descriptor: Union[Descriptor, Condition]) -> None:
    """
    Check a value and raise a descriptive error if it fails.

    Args:
        value: Value to check
        descriptor: Alternatives to accept

    Raises:
        TypeCheckError: If no alternative holds

    Example:
        ```python
        assert_and_raise(-3, [[Cond.positive, Cond.integer], Cond.string])
        # TypeCheckError: Expected positive integer OR string, got a negative number or 0
        ```
    """
    if evaluate(value, descriptor):
        return

    error = TypeCheckError(
        get_message_expected(descriptor),
        get_message_is(value, descriptor),
    )
    logger.debug(f"Type check failed for {value!r}: {error}")
    raise error
