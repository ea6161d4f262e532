from mindpulse.infrastructure.persistence.sqlalchemy.models.assessment_model import AssessmentModel
from mindpulse.infrastructure.persistence.sqlalchemy.models.base import Base

__all__ = ["AssessmentModel", "Base"]
