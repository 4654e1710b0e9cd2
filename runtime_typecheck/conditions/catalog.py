"""
Catalog of pre-built conditions.

Static conditions are module-level singletons and are shared by reference:
every numeric condition lists the same ``number`` instance as prerequisite,
which is what the relevance resolver's identity tracking relies on.
Parameterized conditions are built by factories that return a fresh
instance per call.

Static:
    boolean, function, number, string, null, array,
    true, false, integer, nonnegative, positive, nonempty

Factories:
    type_of(tag), array_of(descriptor), object_of(key_name, descriptor),
    keywords(*words), length(n), in_range(minimum, maximum),
    divisible_by(n), greater_than(n), less_than(n)

Usage:
    ```python
    from runtime_typecheck import assert_and_raise
    from runtime_typecheck.conditions import catalog as Cond

    assert_and_raise(port, [[Cond.integer, Cond.in_range(1, 65535)]])
    assert_and_raise(mode, [Cond.keywords("fast", "safe")])
    assert_and_raise(tags, [Cond.array_of([[Cond.nonempty, Cond.string]])])
    ```
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

from runtime_typecheck.conditions.types import Condition, Descriptor, FailureInfo, Fragment, as_descriptor
from runtime_typecheck.errors import ConditionDefinitionError
from runtime_typecheck.utils.classifier import Tag, classify, enumerate_words
from runtime_typecheck.validation.composer import get_message_expected, get_message_is_iterated
from runtime_typecheck.validation.evaluator import evaluate

Number = Union[int, float]


def type_of(tag: Tag) -> Condition:
    """
    Build a condition matching values classified as ``tag``.

    Its failure message is the value's own tag ("got string").
    """
    return Condition(
        predicate=lambda value: classify(value) == tag,
        should_be=Fragment(type=tag),
        is_=lambda info: info.type,
        name=tag,
    )


boolean = type_of("boolean")
function = type_of("function")
number = type_of("number")
string = type_of("string")
null = type_of("null")
array = type_of("array")
_object = type_of("object")

true = Condition(
    predicate=lambda value: value is True,
    should_be=Fragment(type="true"),
    is_="false",
    conditions=[boolean],
    name="true",
)

false = Condition(
    predicate=lambda value: value is False,
    should_be=Fragment(type="false"),
    is_="true",
    conditions=[boolean],
    name="false",
)

integer = Condition(
    predicate=lambda value: value % 1 == 0,
    should_be=Fragment(type="integer"),
    is_="a floating point number",
    conditions=[number],
    name="integer",
)

nonnegative = Condition(
    predicate=lambda value: value >= 0,
    should_be=Fragment(before=["non-negative"]),
    is_="a negative number",
    conditions=[number],
    name="nonnegative",
)

positive = Condition(
    predicate=lambda value: value > 0,
    should_be=Fragment(before=["positive"]),
    is_="a negative number or 0",
    conditions=[number],
    name="positive",
)

nonempty = Condition(
    predicate=lambda value: len(value) > 0,
    should_be=Fragment(before=["non-empty"]),
    is_=lambda info: f"{info.article} empty {info.type}",
    conditions=[array, string],
    name="nonempty",
)


def array_of(descriptor: Optional[Descriptor] = None) -> Condition:
    """
    Build a condition matching arrays whose items all satisfy ``descriptor``.

    Without a descriptor any array matches.

    Example:
        ```python
        cond = array_of([[positive, integer]])
        get_message_expected([cond])  # "Array<positive integer>"
        get_message_is([1, -2], [cond])  # "Array<a negative number or 0>"
        ```
    """
    if descriptor is None:
        descriptor = []
    descriptor = as_descriptor(descriptor)

    if not descriptor:
        return Condition(
            predicate=lambda value: True,
            should_be=Fragment(type="array"),
            is_=lambda info: info.type,
            conditions=[array],
            name="array_of",
        )

    def describe(info: FailureInfo) -> str:
        if info.type != "array":
            return info.type
        return f"Array<{get_message_is_iterated(info.value, descriptor)}>"

    return Condition(
        predicate=lambda value: all(evaluate(item, descriptor) for item in value),
        should_be=Fragment(type=f"Array<{get_message_expected(descriptor)}>"),
        is_=describe,
        conditions=[array],
        name="array_of",
    )


def _object_values(value: Any):
    if isinstance(value, Mapping):
        return list(value.values())
    return list(getattr(value, "__dict__", {}).values())


def object_of(key_name: str, descriptor: Optional[Descriptor] = None) -> Condition:
    """
    Build a condition matching objects whose values all satisfy ``descriptor``.

    Mappings contribute their values; other objects their instance
    attributes.

    Args:
        key_name: Shown as the key type in "Object<key_name, ...>". Use
            "string" when there is nothing more specific to say.
        descriptor: Conditions every value must satisfy

    Raises:
        ConditionDefinitionError: If key_name is not a string
    """
    if not isinstance(key_name, str):
        raise ConditionDefinitionError(
            "Condition 'object_of': the first argument must be a key name, which is "
            'displayed as "Object<key_name, ...>" in the expected message. '
            "(If generic, just use 'string')"
        )
    if descriptor is None:
        descriptor = []
    descriptor = as_descriptor(descriptor)

    if not descriptor:
        return Condition(
            predicate=lambda value: True,
            should_be=Fragment(type="object"),
            is_=lambda info: info.type,
            conditions=[_object],
            name="object_of",
        )

    def describe(info: FailureInfo) -> str:
        if info.type != "object":
            return info.type
        return f"Object<{key_name}, {get_message_is_iterated(_object_values(info.value), descriptor)}>"

    return Condition(
        predicate=lambda value: all(evaluate(item, descriptor) for item in _object_values(value)),
        should_be=Fragment(type=f"Object<{key_name}, {get_message_expected(descriptor)}>"),
        is_=describe,
        conditions=[_object],
        name="object_of",
    )


def keywords(*words: str) -> Condition:
    """
    Build a condition matching one of the given strings.

    Raises:
        ConditionDefinitionError: If no keyword is given
    """
    if not words:
        raise ConditionDefinitionError("Condition 'keywords' needs at least one keyword")

    quoted = [f'"{word}"' for word in words]
    if len(words) > 1:
        expected = f"one of the keywords {enumerate_words(quoted)}"
    else:
        expected = f"the keyword {quoted[0]}"

    return Condition(
        predicate=lambda value: value in words,
        should_be=Fragment(type=expected),
        is_="a different string",
        conditions=[string],
        name="keywords",
    )


def length(size: int) -> Condition:
    """Build a condition matching arrays or strings of exactly ``size`` items."""
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise ConditionDefinitionError(
            f"Condition 'length' needs a non-negative integer, got {size!r}"
        )

    return Condition(
        predicate=lambda value: len(value) == size,
        should_be=lambda state: Fragment(type=state.type, after=[f"of length {size}"]),
        is_=lambda info: f"{info.article} {info.type} of a different length",
        conditions=[array, string],
        name="length",
    )


def in_range(minimum: Number, maximum: Number) -> Condition:
    """Build a condition matching numbers of the closed interval [minimum, maximum]."""
    if minimum > maximum:
        raise ConditionDefinitionError(
            f"Condition 'in_range': minimum {minimum} is greater than maximum {maximum}"
        )

    return Condition(
        predicate=lambda value: minimum <= value <= maximum,
        should_be=lambda state: Fragment(type=state.type, after=[f"of the interval [{minimum}, {maximum}]"]),
        is_="a number outside of the required range",
        conditions=[number],
        name="in_range",
    )


def divisible_by(divisor: Number) -> Condition:
    """Build a condition matching numbers divisible by ``divisor``."""
    if divisor == 0:
        raise ConditionDefinitionError("Condition 'divisible_by' needs a non-zero divisor")

    return Condition(
        predicate=lambda value: value % divisor == 0,
        should_be=Fragment(after=[f"that is divisible by {divisor}"]),
        is_=f"a number not divisible by {divisor}",
        conditions=[number],
        name="divisible_by",
    )


def greater_than(bound: Number) -> Condition:
    """Build a condition matching numbers strictly greater than ``bound``."""
    return Condition(
        predicate=lambda value: value > bound,
        should_be=Fragment(after=[f"that is greater than {bound}"]),
        is_=f"a number less than or equal to {bound}",
        conditions=[number],
        name="greater_than",
    )


def less_than(bound: Number) -> Condition:
    """Build a condition matching numbers strictly less than ``bound``."""
    return Condition(
        predicate=lambda value: value < bound,
        should_be=Fragment(after=[f"that is less than {bound}"]),
        is_=f"a number greater than or equal to {bound}",
        conditions=[number],
        name="less_than",
    )


# Static conditions addressable by name, used by the CLI.
CATALOG: Dict[str, Condition] = {
    condition.name: condition
    for condition in (
        boolean, function, number, string, null, array,
        true, false, integer, nonnegative, positive, nonempty,
    )
}


def lookup(name: str) -> Condition:
    """
    Return the static catalog condition called ``name``.

    Raises:
        KeyError: If no such condition exists
    """
    try:
        return CATALOG[name]
    except KeyError:
        raise KeyError(
            f"Unknown condition '{name}'. Available: {', '.join(sorted(CATALOG))}"
        ) from None
