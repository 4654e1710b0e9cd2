"""
Condition model - the building blocks of every descriptor.

Structure:
    Descriptor      OR  of ConditionList   (any alternative may match)
    ConditionList   AND of Condition       (a single Condition or a sequence)
    Condition       predicate + optional prerequisite Descriptor + messages

Conditions are immutable and compare by identity. The same instance is
routinely shared between many parents (most numeric conditions require the
"number" condition), so a descriptor describes a DAG rather than a tree.

Each condition carries two message parts:
    - should_be: a Fragment ("before", "type", "after") describing the
      accepted value, or a callable computing one from the running fragment
    - is_: a sentence describing a value that fails the predicate, or a
      callable computing it from a FailureInfo

Example:
    ```python
    number = Condition(
        predicate=lambda v: classify(v) == "number",
        should_be=Fragment(type="number"),
        is_=lambda info: info.type,
    )
    positive = Condition(
        predicate=lambda v: v > 0,
        should_be=Fragment(before=["positive"]),
        is_="a negative number or 0",
        conditions=[number],
    )
    ```
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from runtime_typecheck.errors import ConditionDefinitionError
from runtime_typecheck.utils.classifier import Article, Tag


@dataclass(frozen=True)
class Fragment:
    """
    Partial sentence describing an expected value.

    Rendered as "[before] [type] [after]". ``before`` and ``after`` collect
    every contribution in order, ``type`` keeps the first one written.

    Attributes:
        before: Adjectives placed in front of the type ("positive")
        type: The noun ("integer"), None while unknown
        after: Trailing clauses ("of length 3", "that is divisible by 5")
    """

    before: Tuple[str, ...] = ()
    type: Optional[str] = None
    after: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists for convenience; store tuples so fragments hash.
        object.__setattr__(self, "before", tuple(self.before))
        object.__setattr__(self, "after", tuple(self.after))

    def merge(self, other: "Fragment") -> "Fragment":
        """Return a fragment with ``other`` appended; our type wins if set."""
        return Fragment(
            before=self.before + other.before,
            type=self.type or other.type,
            after=self.after + other.after,
        )


@dataclass(frozen=True)
class FailureInfo:
    """
    Data about a value that failed a condition, passed to callable ``is_``.

    Attributes:
        value: The value that failed
        type: Its classified tag
        article: Indefinite article matching the tag
        conditions: The AND-group of the alternative the blamed condition
            was found in
    """

    value: Any
    type: Tag
    article: Article
    conditions: Tuple["Condition", ...] = ()


ShouldBe = Union[Fragment, Callable[[Fragment], Fragment]]
Is = Union[str, Callable[[FailureInfo], str]]


@dataclass(frozen=True, eq=False)
class Condition:
    """
    A named, composable validation unit.

    ``predicate`` is only ever called with values that already satisfy
    ``conditions``, so it may assume e.g. a number without re-checking.

    Attributes:
        predicate: Returns True if the value satisfies this condition
        should_be: Expected-message fragment or callable producing one
        is_: Failure sentence or callable producing one. Should start with a
            lowercase indefinite article ("a negative number or 0")
        conditions: Prerequisite Descriptor (OR of AND-groups), if any
        name: Optional identifier used in logs and the CLI catalog
    """

    predicate: Callable[[Any], bool]
    should_be: ShouldBe = field(default_factory=Fragment)
    is_: Is = ""
    conditions: Optional[Tuple["ConditionList", ...]] = None
    name: Optional[str] = None

    def __post_init__(self):
        if not callable(self.predicate):
            raise ConditionDefinitionError(
                f"Condition predicate must be callable, got {type(self.predicate).__name__}"
            )
        if not isinstance(self.should_be, Fragment) and not callable(self.should_be):
            raise ConditionDefinitionError(
                "Condition should_be must be a Fragment or a callable returning one"
            )
        if not isinstance(self.is_, str) and not callable(self.is_):
            raise ConditionDefinitionError(
                "Condition is_ must be a string or a callable returning one"
            )
        if self.conditions is not None:
            object.__setattr__(self, "conditions", tuple(as_descriptor(self.conditions)))

    @property
    def has_prerequisites(self) -> bool:
        """True if the condition declares a non-empty prerequisite Descriptor."""
        return bool(self.conditions)

    def expected(self, state: Fragment) -> Fragment:
        """Resolve ``should_be`` against the running fragment."""
        if isinstance(self.should_be, Fragment):
            return self.should_be
        return self.should_be(state)

    def describe(self, info: FailureInfo) -> str:
        """Resolve ``is_`` for a failing value."""
        if isinstance(self.is_, str):
            return self.is_
        return self.is_(info)

    def __repr__(self) -> str:
        return f"Condition({self.name or hex(id(self))})"


ConditionList = Union[Condition, Sequence[Condition]]
Descriptor = Sequence[ConditionList]


def normalize_condition_list(condition_list: ConditionList) -> List[Condition]:
    """
    Return a ConditionList as an AND-group.

    A single Condition becomes a one-element group; a sequence is copied.
    """
    if isinstance(condition_list, Condition):
        return [condition_list]
    return list(condition_list)


def as_descriptor(descriptor: Union[Descriptor, Condition]) -> List[ConditionList]:
    """
    Return a descriptor as a list of alternatives.

    A bare Condition is accepted as a descriptor with one alternative.
    """
    if isinstance(descriptor, Condition):
        return [descriptor]
    return list(descriptor)
