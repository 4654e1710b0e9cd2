"""
CLI command implementations.

This module contains the business logic for each CLI command:
- check: Check a JSON value against catalog conditions
- explain: Show how a descriptor's expected message is composed
- catalog: List the named catalog conditions
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from runtime_typecheck.api import assert_and_raise
from runtime_typecheck.conditions import catalog as Cond
from runtime_typecheck.conditions.types import Descriptor
from runtime_typecheck.errors import TypeCheckError
from runtime_typecheck.validation.composer import get_message_expected, merge_expected, render

from .display import (
    print_catalog,
    print_fragments,
    print_header,
    print_info,
    print_json,
    print_success,
    print_type_check_error,
)

logger = logging.getLogger(__name__)


def load_json_file(json_path: Path) -> Any:
    """
    Load and parse a JSON file.

    Raises:
        ValueError: If the file doesn't exist or isn't valid JSON
    """
    if not json_path.exists():
        raise ValueError(f"JSON file not found: {json_path}")

    try:
        with open(json_path) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_path}: {e}")


def parse_json_value(text: str) -> Any:
    """
    Parse a JSON literal given on the command line.

    Raises:
        ValueError: If the text isn't valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON value {text!r}: {e}")


def build_descriptor(groups: List[str]) -> Descriptor:
    """
    Build a descriptor from catalog names.

    Every entry is one AND-group of comma-separated catalog names; the
    entries together form the OR.

    Example:
        ```python
        build_descriptor(["positive,integer", "string"])
        # [[Cond.positive, Cond.integer], [Cond.string]]
        ```

    Raises:
        ValueError: If no group is given or a name is unknown
    """
    if not groups:
        raise ValueError("At least one --cond is required")

    descriptor = []
    for group in groups:
        names = [name.strip() for name in group.split(",") if name.strip()]
        try:
            descriptor.append([Cond.lookup(name) for name in names])
        except KeyError as e:
            raise ValueError(e.args[0])

    logger.debug(f"Built descriptor with {len(descriptor)} alternative(s) from {groups}")
    return descriptor


def check_command(
    value_text: Optional[str],
    json_path: Optional[Path],
    groups: List[str],
    show_value: bool,
) -> bool:
    """
    Execute the check command.

    Args:
        value_text: JSON literal to check (exclusive with json_path)
        json_path: JSON file to check
        groups: Condition groups, see build_descriptor
        show_value: Whether to print the parsed value

    Returns:
        bool: True if the value passed
    """
    if (value_text is None) == (json_path is None):
        raise ValueError("Pass exactly one of --value or --json")

    value = parse_json_value(value_text) if value_text is not None else load_json_file(json_path)
    descriptor = build_descriptor(groups)

    if show_value:
        print_json(value, title="Value")

    try:
        assert_and_raise(value, descriptor)
    except TypeCheckError as e:
        print_type_check_error(e)
        return False

    print_success(f"Value is {get_message_expected(descriptor)}")
    return True


def explain_command(groups: List[str]) -> None:
    """Execute the explain command."""
    descriptor = build_descriptor(groups)
    fragments = merge_expected(descriptor)
    rendered = [render(fragment) for fragment in fragments]

    print_header("Descriptor Explanation")
    print_fragments(fragments, rendered)
    print_info(f"Expected {get_message_expected(descriptor)}")


def catalog_command() -> None:
    """Execute the catalog command."""
    rows = [
        (name, get_message_expected([condition]))
        for name, condition in sorted(Cond.CATALOG.items())
    ]
    print_catalog(rows)
