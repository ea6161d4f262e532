"""
Tests for the AssessmentEngine pipeline.
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from mindpulse.application.services.assessment_engine import AssessmentEngine
from mindpulse.domain.entities.assessment import InputType, RiskLevel
from mindpulse.domain.interfaces.sentiment_scorer import ISentimentScorer, SentimentScores
from mindpulse.domain.services.report_generator import (
    DISCLAIMER,
    RISK_SUGGESTIONS,
    STATE_POSITIVE,
    STATE_STABLE,
)
from mindpulse.infrastructure.ml.sentiment import ModelSentimentScorer
from mindpulse.infrastructure.ml.sentiment.mocks import MockSentimentClassifier

POSITIVE_TEXT = "今天心情非常好，一切都很顺利"
NEGATIVE_TEXT = "我感到非常焦虑和压抑，很不安"


class TestAssessmentEngine:
    """Test suite for AssessmentEngine.assess."""

    def test_empty_text(self, assessment_engine, user_id):
        """Empty input is assessed, not rejected."""
        assessment = assessment_engine.assess("", "text", user_id)

        assert assessment.stress_level == 0.0
        assert assessment.anxiety_level == 0.0
        assert assessment.risk_level is RiskLevel.LOW
        assert assessment.input_text == ""
        assert DISCLAIMER in assessment.report_text

    def test_none_text_treated_as_empty(self, assessment_engine, user_id):
        assessment = assessment_engine.assess(None, "text", user_id)
        assert assessment.input_text == ""
        assert assessment.risk_level is RiskLevel.LOW

    def test_scores_within_unit_range(self, assessment_engine, user_id):
        assessment = assessment_engine.assess("very very stressed anxious worried panic", "text", user_id)
        for value in (
            assessment.positive_score,
            assessment.negative_score,
            assessment.stress_level,
            assessment.anxiety_level,
        ):
            assert 0.0 <= value <= 1.0

    def test_deterministic(self, assessment_engine, user_id):
        first = assessment_engine.assess(NEGATIVE_TEXT, "text", user_id)
        second = assessment_engine.assess(NEGATIVE_TEXT, "text", user_id)

        assert first.id != second.id
        assert first.report_text == second.report_text
        assert (first.stress_level, first.anxiety_level, first.risk_level) == (
            second.stress_level,
            second.anxiety_level,
            second.risk_level,
        )

    def test_negative_scenario(self, assessment_engine, user_id):
        assessment = assessment_engine.assess(NEGATIVE_TEXT, "text", user_id)

        assert assessment.stress_level == 1.0
        assert assessment.anxiety_level == 1.0
        assert assessment.risk_level is RiskLevel.HIGH
        assert assessment.suggestions[:5] == RISK_SUGGESTIONS[RiskLevel.HIGH]
        assert "2. Risk level: high" in assessment.report_text

    def test_positive_scenario_with_model(self, user_id):
        classifier = MockSentimentClassifier({"positive": 0.92, "negative": 0.08})
        engine = AssessmentEngine(sentiment_scorer=ModelSentimentScorer(classifier))

        assessment = engine.assess(POSITIVE_TEXT, "text", user_id)

        assert classifier.calls == [POSITIVE_TEXT]
        assert assessment.positive_score > 0.7
        assert assessment.negative_score < 0.5
        assert assessment.risk_level is RiskLevel.LOW
        assert f"1. Emotional state: {STATE_POSITIVE}" in assessment.report_text

    def test_positive_scenario_with_keyword_fallback(self, assessment_engine, user_id):
        assessment = assessment_engine.assess(POSITIVE_TEXT, "text", user_id)

        assert assessment.positive_score > assessment.negative_score
        assert assessment.negative_score < 0.5
        assert assessment.stress_level == 0.0
        assert assessment.anxiety_level == 0.0
        assert assessment.risk_level is RiskLevel.LOW
        assert f"1. Emotional state: {STATE_STABLE}" in assessment.report_text

    def test_input_type_does_not_affect_scores(self, assessment_engine, user_id):
        text_result = assessment_engine.assess(NEGATIVE_TEXT, "text", user_id)
        voice_result = assessment_engine.assess(NEGATIVE_TEXT, "voice", user_id)

        assert voice_result.input_type is InputType.VOICE
        assert voice_result.report_text == text_result.report_text

    def test_unknown_input_type_defaults_to_text(self, assessment_engine, user_id):
        assert assessment_engine.assess("hello", "video", user_id).input_type is InputType.TEXT

    def test_failing_model_degrades_to_neutral(self, user_id):
        engine = AssessmentEngine(
            sentiment_scorer=ModelSentimentScorer(MockSentimentClassifier(error=RuntimeError("CUDA out of memory")))
        )
        assessment = engine.assess(NEGATIVE_TEXT, "text", user_id)

        assert assessment.positive_score == 0.5
        assert assessment.negative_score == 0.5
        assert assessment.risk_level is RiskLevel.HIGH

    def test_uses_injected_scorer(self, user_id):
        scorer = MagicMock(spec=ISentimentScorer)
        scorer.score.return_value = SentimentScores(0.2, 0.9)
        engine = AssessmentEngine(sentiment_scorer=scorer)

        assessment = engine.assess("anything", "text", user_id)

        scorer.score.assert_called_once_with("anything")
        assert assessment.negative_score == 0.9

    def test_concurrent_calls(self, assessment_engine):
        users = [uuid4() for _ in range(8)]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda u: assessment_engine.assess(NEGATIVE_TEXT, "text", u), users))

        assert [r.user_id for r in results] == users
        assert len({r.report_text for r in results}) == 1


@pytest.mark.parametrize("text", ["stressed", "焦虑", "fine thanks", "   "])
def test_risk_consistent_with_levels(assessment_engine, user_id, text):
    assessment = assessment_engine.assess(text, "text", user_id)
    combined = round((assessment.stress_level + assessment.anxiety_level) / 2, 9)
    if combined <= 0.3:
        assert assessment.risk_level is RiskLevel.LOW
    elif combined <= 0.7:
        assert assessment.risk_level is RiskLevel.MEDIUM
    else:
        assert assessment.risk_level is RiskLevel.HIGH


def test_risk_ceiling_reached_by_real_text(assessment_engine, user_id):
    assessment = assessment_engine.assess("stressed worried worried" + " fine" * 12, "text", user_id)
    assert assessment.risk_level is RiskLevel.LOW
