"""
Mock sentiment classifier for testing purposes.

Returns canned Hugging Face pipeline-shaped output without loading a model.
"""

from typing import Any


class MockSentimentClassifier:
    """
    Predictable stand-in for a text-classification pipeline.

    Records every text it is called with so tests can assert on delegation.
    """

    def __init__(self, label_scores: dict[str, float] | None = None, error: Exception | None = None):
        """
        Initialize the mock classifier.

        Args:
            label_scores: Label -> score mapping returned for every call
            error: Exception raised on every call instead of returning scores
        """
        self.label_scores = label_scores if label_scores is not None else {"positive": 0.5, "negative": 0.5}
        self.error = error
        self.calls: list[str] = []

    def __call__(self, text: str) -> list[list[dict[str, Any]]]:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return [[{"label": label, "score": score} for label, score in self.label_scores.items()]]
