"""
Risk classification from stress and anxiety levels.
"""

from mindpulse.domain.entities.assessment import RiskLevel

# Upper bounds, inclusive, of the low and medium tiers
LOW_RISK_CEILING = 0.3
MEDIUM_RISK_CEILING = 0.7

DEFAULT_SENSITIVITY_FACTOR = 3.0

# Decimal places kept when comparing against the tier ceilings
THRESHOLD_PRECISION = 9


class RiskClassifier:
    """
    Maps stress/anxiety levels to a risk tier with fixed thresholds.

    Ties at a threshold resolve to the less severe tier.
    """

    def __init__(self, sensitivity_factor: float = DEFAULT_SENSITIVITY_FACTOR):
        self.sensitivity_factor = sensitivity_factor

    def level(self, accumulator: float, token_count: int) -> float:
        """
        Convert a keyword accumulator into a unit level.

        level = min(accumulator / token_count * sensitivity_factor, 1.0),
        with an empty text giving 0.0.
        """
        if token_count <= 0:
            return 0.0
        return min(accumulator / token_count * self.sensitivity_factor, 1.0)

    def classify(self, stress_level: float, anxiety_level: float) -> RiskLevel:
        # 0.2 and 0.4 average to 0.30000000000000004 in binary floating point
        combined = round((stress_level + anxiety_level) / 2, THRESHOLD_PRECISION)
        if combined <= LOW_RISK_CEILING:
            return RiskLevel.LOW
        if combined <= MEDIUM_RISK_CEILING:
            return RiskLevel.MEDIUM
        return RiskLevel.HIGH
