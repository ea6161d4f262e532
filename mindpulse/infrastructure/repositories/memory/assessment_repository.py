"""
In-Memory Assessment Repository Module.

This module provides an in-memory implementation of the assessment
repository interface. It's useful for testing, development, or when
persistent storage is not required.
"""

import asyncio
from uuid import UUID

from mindpulse.domain.entities.assessment import Assessment
from mindpulse.domain.exceptions import PersistenceError
from mindpulse.domain.repositories.assessment_repository import IAssessmentRepository


class InMemoryAssessmentRepository(IAssessmentRepository):
    """
    In-memory implementation of the assessment repository.

    Assessments are immutable, so stored instances are shared without copying.
    """

    def __init__(self):
        self._assessments: dict[UUID, Assessment] = {}
        self._lock = asyncio.Lock()

    async def save(self, assessment: Assessment) -> Assessment:
        async with self._lock:
            if assessment.id in self._assessments:
                raise PersistenceError(f"Assessment {assessment.id} already exists", operation="save")
            self._assessments[assessment.id] = assessment
        return assessment

    async def list_by_user(self, user_id: UUID) -> list[Assessment]:
        async with self._lock:
            matches = [a for a in self._assessments.values() if a.user_id == user_id]
        return sorted(matches, key=lambda a: a.timestamp, reverse=True)

    async def delete_by_id(self, assessment_id: UUID) -> bool:
        async with self._lock:
            return self._assessments.pop(assessment_id, None) is not None

    def __len__(self) -> int:
        return len(self._assessments)
