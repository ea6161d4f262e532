"""
Exception classes related to remote synchronization.
"""

from mindpulse.domain.exceptions.base import DomainException


class SyncError(DomainException):
    """
    Raised when a remote upload fails.

    Covers transport failures, non-2xx responses and payload serialization
    errors. Never surfaced past the storage router's background tasks.
    """

    default_message = "Remote synchronization failed"

    def __init__(
        self,
        message: str | None = None,
        endpoint: str | None = None,
        status_code: int | None = None,
        original_exception: Exception | None = None,
    ):
        message = message or self.default_message
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(
            message,
            original_exception=original_exception,
            endpoint=endpoint,
            status_code=status_code,
        )
        self.endpoint = endpoint
        self.status_code = status_code
