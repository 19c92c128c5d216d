"""
Logging setup for page object runs.

Page interactions log every wait and action at DEBUG, so a failing UI test
can be replayed from its log. Typed text never reaches the log: callers log
``mask_text(text)`` and a filter scrubs credential-looking assignments that
slip into messages anyway.
"""

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


_SECRET_PATTERN = re.compile(
    r'(password|passwd|pwd|secret|token)(["\']?\s*[:=]\s*["\']?)([^"\'\s,]+)',
    flags=re.IGNORECASE
)


def mask_text(text: str) -> str:
    """
    Describe typed text without revealing it.

    Examples:
        >>> mask_text("hunter2")
        '<7 chars>'
        >>> mask_text("")
        '<empty>'
    """
    if not text:
        return "<empty>"
    return f"<{len(text)} chars>"


class SensitiveDataFilter(logging.Filter):
    """Mask values assigned to password/secret/token keys in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        record.msg = _SECRET_PATTERN.sub(r'\1\2********', str(record.msg))
        return True


def setup_logger(
    name: str = "pageobject",
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure the package logger.

    Module loggers (``pageobject.automation.page_object`` ...) propagate to
    this one, so configuring it once covers the whole package.

    Args:
        name: Logger name (default: "pageobject")
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file for file output

    Returns:
        Configured logger instance

    Examples:
        >>> logger = setup_logger(level=logging.DEBUG, log_file="output/ui.log")
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s:%(funcName)s:%(lineno)d %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(SensitiveDataFilter())
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(SensitiveDataFilter())
        logger.addHandler(file_handler)

    return logger
