"""
Domain entity representing an Emotion Assessment.

An assessment is created once per scored input and never mutated afterwards.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from mindpulse.domain.utils.datetime_utils import now_utc


class InputType(str, Enum):
    """Provenance of the assessed text. Does not affect scoring."""

    TEXT = "text"
    VOICE = "voice"

    @classmethod
    def coerce(cls, value: "InputType | str | None") -> "InputType":
        """Map arbitrary input onto a member, defaulting to TEXT."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.TEXT


class RiskLevel(str, Enum):
    """Discrete risk tier derived from stress and anxiety levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Fields safe to share under the hybrid policy
ANONYMIZED_FIELDS = ("positiveScore", "negativeScore", "stressLevel", "anxietyLevel", "riskLevel")


@dataclass(frozen=True, kw_only=True)
class Assessment:
    """Emotion Assessment entity."""

    user_id: UUID
    input_text: str
    input_type: InputType
    positive_score: float
    negative_score: float
    stress_level: float
    anxiety_level: float
    risk_level: RiskLevel
    report_text: str

    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=now_utc)
    suggestions: tuple[str, ...] = ()

    def to_wire(self) -> dict[str, Any]:
        """Full-upload representation with camelCase keys."""
        return {
            "id": str(self.id),
            "userId": str(self.user_id),
            "inputText": self.input_text,
            "inputType": self.input_type.value,
            "assessmentTimestamp": self.timestamp.isoformat(),
            "positiveScore": self.positive_score,
            "negativeScore": self.negative_score,
            "stressLevel": self.stress_level,
            "anxietyLevel": self.anxiety_level,
            "riskLevel": self.risk_level.value,
            "reportText": self.report_text,
        }

    def anonymized(self) -> dict[str, float | str]:
        """
        Non-identifying numeric view of the assessment.

        Excludes id, user id, input text and report text.
        """
        wire = self.to_wire()
        return {key: wire[key] for key in ANONYMIZED_FIELDS}
