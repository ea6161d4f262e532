"""
Keyword-frequency sentiment scorer.

Deterministic fallback used when no sentiment model is configured.
"""

from mindpulse.domain.interfaces.sentiment_scorer import ISentimentScorer, SentimentScores
from mindpulse.domain.services.lexicon import NEGATIVE_EMOTIONS, POSITIVE_EMOTIONS, KeywordSet

# Scores accumulate on a 0-100 scale before being rescaled to the unit scale
HIT_INCREMENT = 20
EMOTION_CAP = 100


class KeywordSentimentScorer(ISentimentScorer):
    """
    Counts emotion keyword occurrences over the whole text.

    Each occurrence adds HIT_INCREMENT to its emotion, capped at EMOTION_CAP.
    positive is the mean of the positive emotions and negative the mean of
    the negative ones, both on the unit scale.
    """

    def __init__(
        self,
        positive_emotions: tuple[KeywordSet, ...] = POSITIVE_EMOTIONS,
        negative_emotions: tuple[KeywordSet, ...] = NEGATIVE_EMOTIONS,
    ):
        self.positive_emotions = positive_emotions
        self.negative_emotions = negative_emotions

    def _emotion_score(self, keywords: KeywordSet, text: str) -> float:
        return min(keywords.count(text) * HIT_INCREMENT, EMOTION_CAP) / EMOTION_CAP

    def score(self, text: str) -> SentimentScores:
        text = text or ""
        components = {
            keywords.name: self._emotion_score(keywords, text)
            for keywords in (*self.positive_emotions, *self.negative_emotions)
        }

        positive = sum(components[k.name] for k in self.positive_emotions) / len(self.positive_emotions)
        negative = sum(components[k.name] for k in self.negative_emotions) / len(self.negative_emotions)

        return SentimentScores(positive=positive, negative=negative, components=components)
