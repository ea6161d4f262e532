from mindpulse.domain.interfaces.remote_sync import IRemoteSync
from mindpulse.domain.interfaces.sentiment_scorer import ISentimentScorer, SentimentScores

__all__ = ["IRemoteSync", "ISentimentScorer", "SentimentScores"]
