"""Unit tests for the logging helper."""

import logging

from src.utils.logging import LOG_FORMAT, get_logger


class TestGetLogger:
    """Test suite for get_logger."""

    def test_configures_once(self):
        """Test that repeated calls do not stack handlers."""
        logger = get_logger("tests.logging.once")
        same = get_logger("tests.logging.once")

        assert logger is same
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt == LOG_FORMAT

    def test_level_by_name(self):
        """Test that level names are accepted."""
        logger = get_logger("tests.logging.debug", level="debug")
        assert logger.level == logging.DEBUG

    def test_default_level(self):
        """Test the default INFO level."""
        logger = get_logger("tests.logging.default")
        assert logger.level == logging.INFO
