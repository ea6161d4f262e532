from mindpulse.infrastructure.ml.sentiment.mocks.mock_classifier import MockSentimentClassifier

__all__ = ["MockSentimentClassifier"]
