"""
Wire schemas for remote assessment uploads.

Field names follow the remote service's camelCase JSON contract.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mindpulse.domain.entities.assessment import InputType, RiskLevel


class AnonymizedAssessmentPayload(BaseModel):
    """Non-identifying numeric fields. Anything else is rejected."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    positive_score: float = Field(..., ge=0.0, le=1.0)
    negative_score: float = Field(..., ge=0.0, le=1.0)
    stress_level: float = Field(..., ge=0.0, le=1.0)
    anxiety_level: float = Field(..., ge=0.0, le=1.0)
    risk_level: RiskLevel


class FullAssessmentPayload(AnonymizedAssessmentPayload):
    """Complete assessment record, including identifying and free-text fields."""

    id: UUID
    user_id: UUID
    input_text: str
    input_type: InputType
    assessment_timestamp: datetime
    report_text: str
