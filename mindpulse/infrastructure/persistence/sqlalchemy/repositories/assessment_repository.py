"""
SQLAlchemy implementation of the assessment repository.

Each operation runs in its own session and transaction, so calls are
individually atomic and concurrent callers never share a session.
"""

import logging
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mindpulse.domain.entities.assessment import Assessment, InputType, RiskLevel
from mindpulse.domain.exceptions import PersistenceError
from mindpulse.domain.repositories.assessment_repository import IAssessmentRepository
from mindpulse.domain.utils.datetime_utils import ensure_utc
from mindpulse.infrastructure.persistence.sqlalchemy.models import AssessmentModel

logger = logging.getLogger(__name__)


class SQLAlchemyAssessmentRepository(IAssessmentRepository):
    """SQLAlchemy-backed local assessment store."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """Initialize with a SQLAlchemy session factory."""
        self.session_factory = session_factory

    async def save(self, assessment: Assessment) -> Assessment:
        """
        Persist a new assessment.

        Args:
            assessment: The assessment to store

        Returns:
            The stored assessment

        Raises:
            PersistenceError: If the insert fails
        """
        try:
            async with self.session_factory() as session, session.begin():
                session.add(self._entity_to_model(assessment))
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to save assessment", operation="save", original_exception=e) from e
        return assessment

    async def list_by_user(self, user_id: UUID) -> list[Assessment]:
        """
        Get a user's assessments.

        Args:
            user_id: UUID of the owning user

        Returns:
            Assessments ordered by timestamp, newest first
        """
        query = (
            sa.select(AssessmentModel)
            .where(AssessmentModel.user_id == user_id)
            .order_by(sa.desc(AssessmentModel.assessment_timestamp))
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                models = result.scalars().all()
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to list assessments", operation="list_by_user", original_exception=e) from e

        try:
            return [self._model_to_entity(model) for model in models]
        except (ValueError, TypeError) as e:
            raise PersistenceError(
                "Stored assessment could not be read", operation="list_by_user", original_exception=e
            ) from e

    async def delete_by_id(self, assessment_id: UUID) -> bool:
        try:
            async with self.session_factory() as session, session.begin():
                result = await session.execute(sa.delete(AssessmentModel).where(AssessmentModel.id == assessment_id))
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to delete assessment", operation="delete_by_id", original_exception=e) from e

        deleted = result.rowcount > 0
        if not deleted:
            logger.debug(f"No assessment {assessment_id} to delete")
        return deleted

    def _entity_to_model(self, assessment: Assessment) -> AssessmentModel:
        return AssessmentModel(
            id=assessment.id,
            user_id=assessment.user_id,
            input_text=assessment.input_text,
            input_type=assessment.input_type.value,
            assessment_timestamp=assessment.timestamp,
            positive_score=assessment.positive_score,
            negative_score=assessment.negative_score,
            stress_level=assessment.stress_level,
            anxiety_level=assessment.anxiety_level,
            risk_level=assessment.risk_level.value,
            report_text=assessment.report_text,
            suggestions=list(assessment.suggestions),
        )

    def _model_to_entity(self, model: AssessmentModel) -> Assessment:
        """
        Convert a database model to a domain entity.

        Args:
            model: The database model

        Returns:
            Domain entity
        """
        return Assessment(
            id=model.id,
            user_id=model.user_id,
            input_text=model.input_text,
            input_type=InputType.coerce(model.input_type),
            timestamp=ensure_utc(model.assessment_timestamp),
            positive_score=model.positive_score,
            negative_score=model.negative_score,
            stress_level=model.stress_level,
            anxiety_level=model.anxiety_level,
            risk_level=RiskLevel(model.risk_level),
            report_text=model.report_text,
            suggestions=tuple(model.suggestions or ()),
        )
