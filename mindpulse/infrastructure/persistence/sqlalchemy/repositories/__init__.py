from mindpulse.infrastructure.persistence.sqlalchemy.repositories.assessment_repository import (
    SQLAlchemyAssessmentRepository,
)

__all__ = ["SQLAlchemyAssessmentRepository"]
