from mindpulse.domain.repositories.assessment_repository import IAssessmentRepository

__all__ = ["IAssessmentRepository"]
