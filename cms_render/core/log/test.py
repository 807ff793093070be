"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "cms-render"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup accepts a numeric level."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op once the root logger has handlers, so only
        # the API contract is checked here.
        assert logger.level == logging.NOTSET

    @pytest.mark.unit
    def test_setup_logging_level_name(self) -> None:
        """Level names are accepted, unknown names fall back to INFO."""
        setup_logging(level="debug", stream=StringIO())
        setup_logging(level="not-a-level", stream=StringIO())

    @pytest.mark.unit
    def test_setup_logging_log_file(self, tmp_path) -> None:
        """A log file can be given instead of a stream."""
        setup_logging(level=logging.INFO, log_file=tmp_path / "cms.log")
