"""
Condition model and catalog.

Components:
    - types: Condition, Fragment, FailureInfo and the Descriptor aliases
    - catalog: Pre-built conditions (number, positive, keywords, ...)

The catalog is imported as a module and conventionally aliased ``Cond``:

    ```python
    from runtime_typecheck.conditions import Condition, Fragment
    from runtime_typecheck.conditions import catalog as Cond

    even = Condition(
        predicate=lambda v: v % 2 == 0,
        should_be=Fragment(before=["even"]),
        is_="an odd number",
        conditions=[Cond.integer],
    )
    ```
"""

from runtime_typecheck.conditions.types import (
    Condition,
    ConditionList,
    Descriptor,
    FailureInfo,
    Fragment,
    as_descriptor,
    normalize_condition_list,
)

__all__ = [
    "Condition",
    "ConditionList",
    "Descriptor",
    "FailureInfo",
    "Fragment",
    "as_descriptor",
    "normalize_condition_list",
]
