from mindpulse.infrastructure.repositories.memory.assessment_repository import InMemoryAssessmentRepository

__all__ = ["InMemoryAssessmentRepository"]
