"""
Tests for risk classification.
"""

import pytest

from mindpulse.domain.entities.assessment import RiskLevel
from mindpulse.domain.services.feature_extractor import FeatureExtractor
from mindpulse.domain.services.risk_classifier import RiskClassifier


@pytest.fixture
def classifier() -> RiskClassifier:
    return RiskClassifier()


class TestLevel:
    """Tests for RiskClassifier.level."""

    def test_zero_tokens_gives_zero(self, classifier):
        assert classifier.level(0.0, 0) == 0.0
        assert classifier.level(3.0, 0) == 0.0

    def test_density_times_sensitivity(self, classifier):
        assert classifier.level(1.0, 10) == pytest.approx(0.3)
        assert classifier.level(1.5, 10) == pytest.approx(0.45)

    def test_capped_at_one(self, classifier):
        assert classifier.level(1.0, 1) == 1.0
        assert classifier.level(5.0, 2) == 1.0

    def test_custom_sensitivity(self):
        assert RiskClassifier(sensitivity_factor=1.0).level(1.0, 4) == pytest.approx(0.25)

    def test_level_grows_with_keyword_density(self, classifier):
        extractor = FeatureExtractor()
        filler = ["fine"] * 9
        levels = []
        for hits in range(4):
            tokens = ["stressed"] * hits + filler[hits:]
            features = extractor.extract(" ".join(tokens))
            levels.append(classifier.level(features.stress_score, features.token_count))

        assert levels == sorted(levels)
        assert levels[0] == 0.0
        assert levels[-1] > levels[1]


class TestClassify:
    """Tests for RiskClassifier.classify thresholds."""

    @pytest.mark.parametrize(
        ("stress", "anxiety", "expected"),
        [
            (0.0, 0.0, RiskLevel.LOW),
            (0.3, 0.3, RiskLevel.LOW),
            (0.6, 0.0, RiskLevel.LOW),
            (0.2, 0.4, RiskLevel.LOW),
            (0.4, 0.2, RiskLevel.LOW),
            (0.31, 0.31, RiskLevel.MEDIUM),
            (0.7, 0.7, RiskLevel.MEDIUM),
            (0.5, 0.9, RiskLevel.MEDIUM),
            (0.4, 1.0, RiskLevel.MEDIUM),
            (1.0, 0.4, RiskLevel.MEDIUM),
            (0.701, 0.701, RiskLevel.HIGH),
            (1.0, 1.0, RiskLevel.HIGH),
        ],
    )
    def test_thresholds(self, classifier, stress, anxiety, expected):
        assert classifier.classify(stress, anxiety) is expected

    def test_uneven_levels_averaging_to_ceiling_stay_low(self, classifier):
        """One stress and two anxiety keywords in fifteen tokens average to exactly 0.3."""
        features = FeatureExtractor().extract("stressed worried worried" + " fine" * 12)
        stress = classifier.level(features.stress_score, features.token_count)
        anxiety = classifier.level(features.anxiety_score, features.token_count)

        assert features.token_count == 15
        assert stress == pytest.approx(0.2)
        assert anxiety == pytest.approx(0.4)
        assert classifier.classify(stress, anxiety) is RiskLevel.LOW
