"""
Logging Utility Module.

This module provides logging utilities for the application, with care taken
that raw user-authored text never reaches a log handler verbatim.
"""

import logging
import re

# Quoted fragments at least this long are treated as user-authored free text
_MIN_REDACT_LENGTH = 12
_QUOTED_TEXT = re.compile(r"""(['"])([^'"]{%d,})\1""" % _MIN_REDACT_LENGTH)


def redact_free_text(message: str) -> str:
    """Replace long quoted fragments with a length marker."""
    return _QUOTED_TEXT.sub(lambda m: f"{m.group(1)}<redacted:{len(m.group(2))} chars>{m.group(1)}", message)


class SensitiveTextFilter(logging.Filter):
    """Custom logging filter that masks quoted free text in log records."""

    def __init__(self, name: str = "SensitiveTextFilter"):
        super().__init__(name)

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize the fully formatted message of the record."""
        original_message = record.getMessage()
        sanitized_message = redact_free_text(original_message)

        if sanitized_message != original_message:
            # Args are baked into the formatted message
            record.msg = sanitized_message
            record.args = ()

        return True  # Always process the record after potential sanitization


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger carrying the sensitive text filter.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, SensitiveTextFilter) for f in logger.filters):
        logger.addFilter(SensitiveTextFilter())
    return logger
