"""
SQLAlchemy model for locally stored assessments.
"""

import sqlalchemy as sa

from mindpulse.infrastructure.persistence.sqlalchemy.models.base import Base
from mindpulse.infrastructure.persistence.sqlalchemy.types import GUID


class AssessmentModel(Base):
    """
    Model for storing assessments.

    Holds the complete record, including the sensitive input and report text.
    """

    __tablename__ = "assessments"

    id = sa.Column(GUID, primary_key=True)
    user_id = sa.Column(GUID, nullable=False)

    input_text = sa.Column(sa.Text, nullable=False, default="")
    input_type = sa.Column(sa.String(16), nullable=False)
    assessment_timestamp = sa.Column(sa.DateTime(timezone=True), nullable=False)

    # Scores on the unit scale
    positive_score = sa.Column(sa.Float, nullable=False)
    negative_score = sa.Column(sa.Float, nullable=False)
    stress_level = sa.Column(sa.Float, nullable=False)
    anxiety_level = sa.Column(sa.Float, nullable=False)
    risk_level = sa.Column(sa.String(16), nullable=False)

    report_text = sa.Column(sa.Text, nullable=False, default="")
    suggestions = sa.Column(sa.JSON, nullable=False, default=list)

    # Indexes for common query patterns
    __table_args__ = (
        sa.Index("idx_assessments_user_timestamp", "user_id", "assessment_timestamp"),
    )
