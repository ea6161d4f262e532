"""
Tests for service container wiring.
"""

import pytest

from mindpulse.core.config.settings import Settings
from mindpulse.infrastructure.di.container import build_assessment_engine, build_container
from mindpulse.infrastructure.ml.sentiment import KeywordSentimentScorer, ModelSentimentScorer
from mindpulse.infrastructure.ml.sentiment.mocks import MockSentimentClassifier
from mindpulse.tests.helpers.fakes import RecordingRemoteSync


class TestBuildAssessmentEngine:
    """Tests for engine construction from settings."""

    def test_scoring_constants_from_settings(self):
        settings = Settings(_env_file=None, SENSITIVITY_FACTOR=2.0, INTENSIFIER_MULTIPLIER=2.5)
        engine = build_assessment_engine(settings)

        assert engine.risk_classifier.sensitivity_factor == 2.0
        assert engine.feature_extractor.intensifier_multiplier == 2.5
        assert isinstance(engine.sentiment_scorer, KeywordSentimentScorer)

    def test_classifier_selects_model_scorer(self, test_settings):
        engine = build_assessment_engine(test_settings, classifier=MockSentimentClassifier())
        assert isinstance(engine.sentiment_scorer, ModelSentimentScorer)


@pytest.mark.asyncio
class TestServiceContainer:
    """Tests for container lifecycle."""

    async def test_injected_collaborators_used(self, test_settings, memory_repository):
        sync = RecordingRemoteSync()
        container = build_container(test_settings, repository=memory_repository, remote_sync=sync)

        assert container.repository is memory_repository
        assert container.router.repository is memory_repository
        assert container.router.remote_sync is sync
        assert container.db_engine is None

        await container.startup()
        await container.shutdown()

    async def test_default_wiring_lifecycle(self, test_settings, user_id):
        container = build_container(test_settings, remote_sync=RecordingRemoteSync())
        assert container.db_engine is not None

        await container.startup()
        assert await container.router.fetch_history(user_id) == []
        await container.shutdown()
