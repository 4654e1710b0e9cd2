"""
Unit tests for logging setup and debug output.
"""

import logging

import pytest
from runtime_typecheck import Cond, TypeCheckError, assert_and_raise
from runtime_typecheck.utils import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("runtime_typecheck")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if getattr(handler, "_runtime_typecheck", False):
            logger.removeHandler(handler)
    logger.setLevel(level)


class TestSetupLogging:
    """Test handler installation."""

    def test_sets_level(self, package_logger):
        assert setup_logging("debug") is package_logger
        assert package_logger.level == logging.DEBUG

    def test_handler_not_stacked(self, package_logger):
        setup_logging(logging.INFO)
        setup_logging(logging.WARNING)

        marked = [h for h in package_logger.handlers if getattr(h, "_runtime_typecheck", False)]
        assert len(marked) == 1
        assert package_logger.level == logging.WARNING


class TestDebugOutput:
    """Test failed checks are logged at DEBUG."""

    def test_blame_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="runtime_typecheck"):
            with pytest.raises(TypeCheckError):
                assert_and_raise(-3, [[Cond.positive, Cond.integer]])

        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("Blamed") for message in messages)
        assert any("Type check failed for -3" in message for message in messages)
