"""
Exception classes related to persistence operations.

This module defines exceptions raised by the local assessment store.
"""

from mindpulse.domain.exceptions.base import DomainException


class PersistenceError(DomainException):
    """Raised when a local store write, read or delete fails."""

    default_message = "Persistence operation failed"

    def __init__(
        self,
        message: str | None = None,
        operation: str | None = None,
        original_exception: Exception | None = None,
    ):
        message = message or self.default_message
        if operation:
            message = f"{message} during {operation}"
        super().__init__(message, original_exception=original_exception, operation=operation)
        self.operation = operation
