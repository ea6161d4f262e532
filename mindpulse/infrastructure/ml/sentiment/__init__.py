"""Sentiment scorer implementations: model-backed and keyword fallback."""

from mindpulse.infrastructure.ml.sentiment.factory import build_sentiment_scorer
from mindpulse.infrastructure.ml.sentiment.keyword_scorer import KeywordSentimentScorer
from mindpulse.infrastructure.ml.sentiment.model_scorer import ModelSentimentScorer

__all__ = ["KeywordSentimentScorer", "ModelSentimentScorer", "build_sentiment_scorer"]
