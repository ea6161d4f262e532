"""
Assessment Engine.

Composes feature extraction, sentiment scoring, risk classification and
report rendering into a single assessment operation.
"""

from uuid import UUID

from mindpulse.core.utils.logging import get_logger
from mindpulse.domain.entities.assessment import Assessment, InputType
from mindpulse.domain.interfaces.sentiment_scorer import ISentimentScorer
from mindpulse.domain.services.feature_extractor import FeatureExtractor
from mindpulse.domain.services.report_generator import ReportGenerator
from mindpulse.domain.services.risk_classifier import RiskClassifier
from mindpulse.infrastructure.ml.sentiment.keyword_scorer import KeywordSentimentScorer

logger = get_logger(__name__)


class AssessmentEngine:
    """
    Synchronous, CPU-only scoring pipeline.

    The engine keeps no per-call state, so one instance can serve concurrent
    calls from any number of threads. Any text, including an empty one,
    produces an assessment.
    """

    def __init__(
        self,
        sentiment_scorer: ISentimentScorer | None = None,
        feature_extractor: FeatureExtractor | None = None,
        risk_classifier: RiskClassifier | None = None,
        report_generator: ReportGenerator | None = None,
    ):
        self.sentiment_scorer = sentiment_scorer or KeywordSentimentScorer()
        self.feature_extractor = feature_extractor or FeatureExtractor()
        self.risk_classifier = risk_classifier or RiskClassifier()
        self.report_generator = report_generator or ReportGenerator()

    def assess(self, text: str | None, input_type: InputType | str, user_id: UUID) -> Assessment:
        """
        Score a text and build its assessment.

        Args:
            text: Typed or transcribed text; None is treated as empty
            input_type: Provenance of the text, "text" or "voice"
            user_id: Owning user

        Returns:
            A new immutable Assessment
        """
        text = text or ""

        features = self.feature_extractor.extract(text)
        stress_level = self.risk_classifier.level(features.stress_score, features.token_count)
        anxiety_level = self.risk_classifier.level(features.anxiety_score, features.token_count)
        risk_level = self.risk_classifier.classify(stress_level, anxiety_level)

        scores = self.sentiment_scorer.score(text)
        report = self.report_generator.generate(scores, stress_level, anxiety_level, risk_level)

        assessment = Assessment(
            user_id=user_id,
            input_text=text,
            input_type=InputType.coerce(input_type),
            positive_score=scores.positive,
            negative_score=scores.negative,
            stress_level=stress_level,
            anxiety_level=anxiety_level,
            risk_level=risk_level,
            report_text=report.report_text,
            suggestions=report.suggestions,
        )

        logger.debug(
            f"Assessment {assessment.id} scored: tokens={features.token_count} "
            f"stress={stress_level:.3f} anxiety={anxiety_level:.3f} risk={risk_level.value}"
        )
        return assessment
