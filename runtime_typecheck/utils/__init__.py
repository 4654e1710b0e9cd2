"""
Utility functions and helpers.

This module contains shared utilities used across runtime_typecheck components.

Components:
    - classifier: Runtime type tags, indefinite articles, enumerated lists
    - log: Logging configuration for applications and the CLI

Example:
    ```python
    from runtime_typecheck.utils import classify, article, setup_logging

    setup_logging(level="DEBUG")

    tag = classify(3.5)
    print(f"got {article(tag)} {tag}")  # got a number
    ```
"""

from runtime_typecheck.utils.classifier import (
    UNDEFINED,
    Article,
    Tag,
    article,
    classify,
    enumerate_words,
)
from runtime_typecheck.utils.log import setup_logging

__all__ = [
    "UNDEFINED",
    "Article",
    "Tag",
    "article",
    "classify",
    "enumerate_words",
    "setup_logging",
]
