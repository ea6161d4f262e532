"""
Interface for the remote synchronization collaborator.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from mindpulse.domain.entities.assessment import Assessment


class IRemoteSync(ABC):
    """Abstract base class for remote upload transports."""

    @abstractmethod
    async def upload_full(self, assessment: Assessment) -> None:
        """
        Upload the complete assessment record.

        Raises:
            SyncError: On transport failure, non-2xx response or serialization error
        """
        pass

    @abstractmethod
    async def upload_anonymized(self, payload: Mapping[str, float | str]) -> None:
        """
        Upload a non-identifying mapping of field name to value.

        Raises:
            SyncError: On transport failure, non-2xx response or serialization error
        """
        pass
