"""
Command-line interface module.

This module provides a rich terminal interface for runtime_typecheck using Typer and Rich.

Commands:
    - check: Check a JSON value against catalog conditions
    - explain: Show the merged expected fragments of a descriptor
    - catalog: List the named catalog conditions

Each --cond option is one AND-group of comma-separated catalog names;
repeating --cond adds OR alternatives.

Example Usage:
    ```bash
    # Passes
    runtime-typecheck check --value 12 --cond positive,integer

    # Fails: Expected positive integer OR string, got a negative number or 0
    runtime-typecheck check --value "-3" --cond positive,integer --cond string

    # Check a file and show it
    runtime-typecheck check --json payload.json --cond nonempty --show-value

    # How is the message built?
    runtime-typecheck explain --cond nonempty,string --cond nonnegative
    ```
"""

from .main import app

__all__ = ["app"]
