"""
Model-backed sentiment scorer.

Wraps a text-classification callable with the Hugging Face pipeline output
shape. Any failure of the classifier degrades to neutral scores.
"""

import logging
from collections.abc import Callable
from typing import Any

from mindpulse.domain.interfaces.sentiment_scorer import ISentimentScorer, SentimentScores

logger = logging.getLogger(__name__)

# Output of a text-classification pipeline called with top_k=None
Classifier = Callable[[str], Any]

POSITIVE_LABELS = frozenset({"positive", "pos", "joy", "happy", "happiness", "love", "optimism", "calm"})
NEGATIVE_LABELS = frozenset(
    {"negative", "neg", "sadness", "sad", "anger", "angry", "fear", "disgust", "anxiety", "anxious"}
)


def _label_scores(raw: Any) -> dict[str, float]:
    """
    Flatten pipeline output into a label -> score mapping.

    Pipelines return either [{"label", "score"}, ...] or, for batched input,
    [[{"label", "score"}, ...]].
    """
    if isinstance(raw, list) and raw and isinstance(raw[0], list):
        raw = raw[0]
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        return {}

    scores: dict[str, float] = {}
    for item in raw:
        if isinstance(item, dict) and isinstance(item.get("label"), str):
            scores[item["label"].strip().lower()] = float(item.get("score", 0.0))
    return scores


class ModelSentimentScorer(ISentimentScorer):
    """Sentiment scorer delegating to a pluggable classifier."""

    def __init__(self, classifier: Classifier | None, model_name: str | None = None):
        self.classifier = classifier
        self.model_name = model_name

    @property
    def is_available(self) -> bool:
        return self.classifier is not None

    def score(self, text: str) -> SentimentScores:
        if self.classifier is None:
            logger.warning("Sentiment model unavailable, returning neutral scores")
            return SentimentScores.neutral()

        try:
            labels = _label_scores(self.classifier(text or ""))
        except Exception as e:
            logger.warning(f"Sentiment model {self.model_name or 'classifier'} failed: {type(e).__name__}: {e!s}")
            return SentimentScores.neutral()

        positive = [score for label, score in labels.items() if label in POSITIVE_LABELS]
        negative = [score for label, score in labels.items() if label in NEGATIVE_LABELS]
        if not positive and not negative:
            logger.warning(f"Sentiment model returned no recognized labels: {sorted(labels)}")
            return SentimentScores.neutral()

        return SentimentScores(positive=sum(positive), negative=sum(negative), components=labels)


def load_transformers_classifier(model_name: str) -> Classifier | None:
    """
    Load a Hugging Face text-classification pipeline.

    Returns None when transformers is not installed or the model cannot be
    loaded; the scorer then yields neutral scores.
    """
    try:
        from transformers import pipeline

        classifier = pipeline("text-classification", model=model_name, top_k=None)
    except Exception as e:
        logger.error(f"Failed to load sentiment model {model_name}: {type(e).__name__}: {e!s}")
        return None

    logger.info(f"Loaded sentiment model {model_name}")
    return classifier
