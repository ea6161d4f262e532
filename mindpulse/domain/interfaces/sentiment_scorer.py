"""
Interface for Sentiment Scorers.

Defines the contract shared by the model-backed scorer and the keyword
fallback, so the assessment engine is agnostic to which one is active.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


def clamp_unit(value: float) -> float:
    """Clamp a score into [0, 1]."""
    return max(0.0, min(1.0, float(value)))


@dataclass(frozen=True)
class SentimentScores:
    """
    Polarity scores on the unit scale.

    positive and negative are independent and need not sum to 1.
    components holds per-emotion scores (e.g. "sadness", "anxiety") when the
    scorer produces them.
    """

    positive: float
    negative: float
    components: dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "positive", clamp_unit(self.positive))
        object.__setattr__(self, "negative", clamp_unit(self.negative))

    @classmethod
    def neutral(cls) -> "SentimentScores":
        """Default returned when a scorer cannot produce a result."""
        return cls(positive=0.5, negative=0.5)


class ISentimentScorer(ABC):
    """Abstract base class for sentiment scorers."""

    @abstractmethod
    def score(self, text: str) -> SentimentScores:
        """
        Score the polarity of the whole text.

        Implementations must not raise; failures degrade to neutral scores.
        """
        pass
