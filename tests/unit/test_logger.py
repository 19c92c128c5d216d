"""
Unit tests for logging utilities.
"""

import logging
from logging.handlers import RotatingFileHandler

from pageobject.utils.logger import SensitiveDataFilter, mask_text, setup_logger


def _record(msg, args=()):
    return logging.LogRecord("pageobject.test", logging.INFO, __file__, 1, msg, args, None)


class TestMaskText:
    """Test suite for mask_text."""

    def test_mask_text(self):
        assert mask_text("hunter2") == "<7 chars>"

    def test_mask_empty_text(self):
        assert mask_text("") == "<empty>"


class TestSensitiveDataFilter:
    """Test suite for SensitiveDataFilter."""

    def test_masks_password_assignment(self):
        """Test password values are masked."""
        record = _record("login password=hunter2 user=bob")

        assert SensitiveDataFilter().filter(record) is True
        assert record.getMessage() == "login password=******** user=bob"

    def test_masks_formatted_arguments(self):
        """Test values passed as log arguments are masked too."""
        record = _record("token: %s", ("abc123",))

        SensitiveDataFilter().filter(record)

        assert record.getMessage() == "token: ********"

    def test_leaves_other_messages_alone(self):
        """Test messages without secrets pass unchanged."""
        record = _record("Clicked: id='submit'")

        SensitiveDataFilter().filter(record)

        assert record.getMessage() == "Clicked: id='submit'"


class TestSetupLogger:
    """Test suite for setup_logger."""

    def test_console_logger(self):
        """Test a console handler is attached."""
        logger = setup_logger(name="pageobject.test_console", level=logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_idempotent(self):
        """Test repeated setup does not duplicate handlers."""
        first = setup_logger(name="pageobject.test_idempotent")
        second = setup_logger(name="pageobject.test_idempotent")

        assert first is second
        assert len(second.handlers) == 1

    def test_file_logger(self, tmp_path):
        """Test file output creates the log directory."""
        log_file = tmp_path / "logs" / "ui.log"

        logger = setup_logger(name="pageobject.test_file", log_file=str(log_file))
        logger.info("password=hunter2")
        for handler in logger.handlers:
            handler.flush()

        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        assert "password=********" in log_file.read_text(encoding="utf-8")

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
