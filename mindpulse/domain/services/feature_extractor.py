"""
Stress and anxiety feature extraction.

Walks the whitespace tokens of a text and accumulates weighted keyword hits.
"""

from dataclasses import dataclass

from mindpulse.domain.services.lexicon import (
    ANXIETY_KEYWORDS,
    INTENSIFIERS,
    STRESS_KEYWORDS,
    KeywordSet,
    normalize_token,
)

DEFAULT_INTENSIFIER_MULTIPLIER = 1.5


@dataclass(frozen=True)
class TextFeatures:
    """Raw keyword accumulators for one text."""

    stress_score: float
    anxiety_score: float
    token_count: int


class FeatureExtractor:
    """
    Keyword-density feature extractor.

    An intensifier raises the weight of the next token's keyword matches to
    the intensifier multiplier; the weight falls back to 1.0 once that token
    has been inspected, whether or not it matched. A token that is itself an
    intensifier passes the weight on to the following token. A token that only
    contains one (unsegmented Chinese text) applies it to its own matches.
    """

    def __init__(
        self,
        stress_keywords: KeywordSet = STRESS_KEYWORDS,
        anxiety_keywords: KeywordSet = ANXIETY_KEYWORDS,
        intensifiers: KeywordSet = INTENSIFIERS,
        intensifier_multiplier: float = DEFAULT_INTENSIFIER_MULTIPLIER,
    ):
        self.stress_keywords = stress_keywords
        self.anxiety_keywords = anxiety_keywords
        self.intensifiers = intensifiers
        self.intensifier_multiplier = intensifier_multiplier

    def extract(self, text: str | None) -> TextFeatures:
        tokens = (text or "").split()
        stress = 0.0
        anxiety = 0.0
        multiplier = 1.0

        for token in tokens:
            if normalize_token(token) in self.intensifiers:
                multiplier = self.intensifier_multiplier
                continue

            if self.intensifiers.matches(token):
                multiplier = self.intensifier_multiplier

            # A token may count toward both sets
            if self.stress_keywords.matches(token):
                stress += 1.0 * multiplier
            if self.anxiety_keywords.matches(token):
                anxiety += 1.0 * multiplier

            multiplier = 1.0

        return TextFeatures(stress_score=stress, anxiety_score=anxiety, token_count=len(tokens))
