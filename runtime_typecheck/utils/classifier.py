"""
Value classifier - runtime type tags and small grammar helpers.

The tag set is closed and deliberately coarser than Python's own type system,
because the tags end up inside user-facing sentences such as
"got an empty array" or "got a string of a different length".

Tags:
    array, NaN, null, string, number, bigint, boolean,
    symbol, undefined, object, function

Usage:
    ```python
    from runtime_typecheck.utils.classifier import classify, article

    tag = classify([1, 2, 3])      # "array"
    f"{article(tag)} {tag}"        # "an array"
    ```
"""

import enum
import math
from decimal import Decimal
from fractions import Fraction
from typing import Any, List, Literal

Tag = Literal[
    "array", "NaN", "null", "string", "number", "bigint",
    "boolean", "symbol", "undefined", "object", "function",
]
Article = Literal["a", "an"]

# Largest integer a double represents exactly; anything beyond is reported
# as a bigint.
MAX_SAFE_INTEGER = 2 ** 53 - 1


class _Undefined:
    """Marker for a value that was never provided (e.g. a missing key)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def classify(value: Any) -> Tag:
    """
    Return the runtime tag of a value.

    Arrays, NaN and null are recognised before the generic checks, and
    booleans before numbers since ``bool`` is a subclass of ``int``.

    Args:
        value: Any Python value

    Returns:
        Tag: One of the eleven tag strings

    Example:
        ```python
        classify(None)          # "null"
        classify(float("nan"))  # "NaN"
        classify(True)          # "boolean"
        classify({"a": 1})      # "object"
        ```
    """
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, Decimal) and value.is_nan():
        return "NaN"
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "bigint" if abs(value) > MAX_SAFE_INTEGER else "number"
    if isinstance(value, (float, Decimal, Fraction)):
        return "number"
    if isinstance(value, enum.Enum):
        return "symbol"
    if callable(value):
        return "function"
    return "object"


def article(word: str) -> Article:
    """
    Get the indefinite article for a word.

    Only looks at whether the first character is a vowel, so "an unicorn"
    and "a hour" are what you get.
    """
    return "an" if word[:1].lower() in ("a", "e", "i", "o", "u") else "a"


def enumerate_words(words: List[str]) -> str:
    """
    Join words in the style "first, second or third".

    Args:
        words: Words to join, already quoted if the caller wants quotes

    Returns:
        str: The enumerated list ("" for no words, the word itself for one)

    Example:
        ```python
        enumerate_words(["x", "y", "z"])  # "x, y or z"
        enumerate_words(["x"])            # "x"
        ```
    """
    words = list(words)
    if len(words) < 2:
        return "".join(words)
    return ", ".join(words[:-1]) + " or " + words[-1]
