"""
Exception types raised by runtime_typecheck.

Two kinds of errors exist:
    - ConditionDefinitionError: a condition or catalog factory was built with
      malformed arguments. Raised at construction time, before any value is
      checked.
    - TypeCheckError: a value did not satisfy a descriptor. Only raised by
      ``assert_and_raise``; ``check`` reports failure by returning False.

Exceptions thrown by user predicates are never wrapped.
"""


class ConditionDefinitionError(ValueError):
    """Raised when a condition is constructed from invalid arguments."""


class TypeCheckError(Exception):
    """
    Raised when a value does not satisfy any alternative of a descriptor.

    Attributes:
        expected: Sentence describing every accepted alternative,
            e.g. "positive integer OR string"
        actual: Sentence describing the value through its most relevant
            failing condition, e.g. "a negative number or 0"
    """

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual

    def __reduce__(self):
        return (self.__class__, (self.expected, self.actual))


def format_type_check_error(error: TypeCheckError, label: str = "value") -> str:
    """
    Format a type check error as a multi-line block.

    Args:
        error: The error to format
        label: Name of the checked value, shown in the header

    Returns:
        str: Formatted error

    Example:
        ```python
        try:
            assert_and_raise(-3, [[Cond.positive, Cond.integer]])
        except TypeCheckError as e:
            print(format_type_check_error(e, "retries"))
            # Type check failed for retries
            #    Problem: Expected positive integer, got a negative number or 0
            #    Expected: positive integer
            #    Got: a negative number or 0
        ```
    """
    lines = [
        f"Type check failed for {label}",
        f"   Problem: {error}",
        f"   Expected: {error.expected}",
        f"   Got: {error.actual or 'an unknown value'}",
    ]
    return "\n".join(lines)
