"""Rule-based scoring services of the assessment engine."""

from mindpulse.domain.services.feature_extractor import FeatureExtractor, TextFeatures
from mindpulse.domain.services.report_generator import Report, ReportGenerator
from mindpulse.domain.services.risk_classifier import RiskClassifier

__all__ = [
    "FeatureExtractor",
    "Report",
    "ReportGenerator",
    "RiskClassifier",
    "TextFeatures",
]
