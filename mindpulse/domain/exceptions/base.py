"""
Root of the assessment engine's error taxonomy.

Scoring never raises; only the storage side of the engine does. Each storage
error wraps the library exception that caused it and records where it
happened, so callers can log it or map it to a response without parsing the
message.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for assessment engine errors."""

    default_message = "Assessment engine error"

    def __init__(
        self,
        message: str | None = None,
        original_exception: Exception | None = None,
        **context: Any,
    ):
        """
        Args:
            message: Human-readable description; default_message when omitted
            original_exception: Library exception being wrapped, if any
            **context: Structured details such as operation, endpoint or status_code
        """
        self.message = message or self.default_message
        self.original_exception = original_exception
        self.context = {key: value for key, value in context.items() if value is not None}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_log_dict(self) -> dict[str, Any]:
        """Structured view for log records; never includes assessed text."""
        details: dict[str, Any] = {"error": type(self).__name__, "message": self.message, **self.context}
        if self.original_exception is not None:
            details["cause"] = type(self.original_exception).__name__
        return details
