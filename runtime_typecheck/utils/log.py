"""
Logging configuration for the runtime_typecheck package.

Library modules only create loggers via ``logging.getLogger(__name__)``;
handlers are installed by applications (or the CLI) through
``setup_logging``.
"""

import logging
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this twice replaces the handler instead of stacking a second one.

    Args:
        level: Logging level name or number
        fmt: Log record format (defaults to DEFAULT_FORMAT)

    Returns:
        logging.Logger: The configured package logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("runtime_typecheck")
    for handler in list(logger.handlers):
        if getattr(handler, "_runtime_typecheck", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    handler._runtime_typecheck = True
    logger.addHandler(handler)
    logger.setLevel(level)

    logger.debug(f"Logging configured at level {logging.getLevelName(level)}")
    return logger
