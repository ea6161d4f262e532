"""
Sentiment scorer selection.
"""

import logging

from mindpulse.core.config.settings import Settings
from mindpulse.domain.interfaces.sentiment_scorer import ISentimentScorer
from mindpulse.infrastructure.ml.sentiment.keyword_scorer import KeywordSentimentScorer
from mindpulse.infrastructure.ml.sentiment.model_scorer import (
    Classifier,
    ModelSentimentScorer,
    load_transformers_classifier,
)

logger = logging.getLogger(__name__)


def build_sentiment_scorer(settings: Settings, classifier: Classifier | None = None) -> ISentimentScorer:
    """
    Choose the sentiment scorer once, at construction time.

    Args:
        settings: Application settings
        classifier: Optional preloaded classifier, used instead of loading SENTIMENT_MODEL_NAME

    Returns:
        A model-backed scorer when a model is configured or supplied, otherwise the keyword scorer
    """
    if classifier is not None:
        return ModelSentimentScorer(classifier, model_name=settings.SENTIMENT_MODEL_NAME)

    if not settings.SENTIMENT_MODEL_NAME:
        logger.info("No sentiment model configured, using keyword scorer")
        return KeywordSentimentScorer()

    return ModelSentimentScorer(
        load_transformers_classifier(settings.SENTIMENT_MODEL_NAME),
        model_name=settings.SENTIMENT_MODEL_NAME,
    )
