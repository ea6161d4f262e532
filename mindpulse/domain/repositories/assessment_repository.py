"""
Interface for the Assessment Repository.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from mindpulse.domain.entities.assessment import Assessment


class IAssessmentRepository(ABC):
    """
    Abstract base class defining the local assessment store.

    Each call is expected to be individually atomic; implementations own their
    concurrency control. All methods raise PersistenceError on failure.
    """

    @abstractmethod
    async def save(self, assessment: Assessment) -> Assessment:
        """Persist a new assessment record."""
        pass

    # Assessments are immutable, so there is no update

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> list[Assessment]:
        """List a user's assessments, newest first."""
        pass

    @abstractmethod
    async def delete_by_id(self, assessment_id: UUID) -> bool:
        """Delete an assessment by ID. Returns False when nothing matched."""
        pass
