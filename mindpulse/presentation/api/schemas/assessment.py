"""
Assessment Schemas Module.

Pydantic models for the assessment endpoints.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from mindpulse.domain.entities.assessment import Assessment, InputType, RiskLevel
from mindpulse.domain.entities.user import DataStoragePreference


class AssessmentAPIModel(BaseModel):
    """Shared configuration: field names or aliases on input, entity attributes on output."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True, use_enum_values=False)


class AssessmentCreateRequest(AssessmentAPIModel):
    """Request schema for assessing and storing a text."""

    text: str | None = Field("", description="Typed or transcribed text; may be empty or null")
    input_type: str = Field(InputType.TEXT.value, description="Provenance of the text: text or voice")
    user_id: UUID = Field(..., description="Owning user")
    storage_preference: DataStoragePreference | None = Field(
        None, description="User's data-sharing policy; the configured default when omitted"
    )


class AssessmentResponse(AssessmentAPIModel):
    """Response schema for a single assessment."""

    id: UUID
    user_id: UUID
    input_type: InputType
    timestamp: datetime
    positive_score: float
    negative_score: float
    stress_level: float
    anxiety_level: float
    risk_level: RiskLevel
    report_text: str
    suggestions: list[str]

    @classmethod
    def from_entity(cls, assessment: Assessment) -> "AssessmentResponse":
        return cls(
            id=assessment.id,
            user_id=assessment.user_id,
            input_type=assessment.input_type,
            timestamp=assessment.timestamp,
            positive_score=assessment.positive_score,
            negative_score=assessment.negative_score,
            stress_level=assessment.stress_level,
            anxiety_level=assessment.anxiety_level,
            risk_level=assessment.risk_level,
            report_text=assessment.report_text,
            suggestions=list(assessment.suggestions),
        )


class AssessmentListResponse(AssessmentAPIModel):
    """Response schema for a user's assessment history, newest first."""

    user_id: UUID
    assessments: list[AssessmentResponse]
