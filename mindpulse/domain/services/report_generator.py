"""
Report and suggestion generation.

Renders a deterministic plain-text report from assessment scores. Nothing
here depends on the clock or on randomness, so equal inputs give equal text.
"""

from dataclasses import dataclass

from mindpulse.domain.entities.assessment import RiskLevel
from mindpulse.domain.interfaces.sentiment_scorer import SentimentScores

POSITIVE_STATE_THRESHOLD = 0.7
NEGATIVE_STATE_THRESHOLD = 0.7
COMPONENT_SUGGESTION_THRESHOLD = 0.6

STATE_POSITIVE = "positive/optimistic"
STATE_LOW_MOOD = "low mood"
STATE_STABLE = "stable"
STATE_MILDLY_NEGATIVE = "mildly negative"

RISK_SUGGESTIONS: dict[RiskLevel, tuple[str, ...]] = {
    RiskLevel.LOW: (
        "Keep a regular daily routine",
        "Get moderate exercise",
        "Practice deep breathing",
    ),
    RiskLevel.MEDIUM: (
        "Try meditation or relaxation exercises",
        "Talk things through with friends or family",
        "Adjust the pace of your work",
        "Make sure you get enough sleep",
    ),
    RiskLevel.HIGH: (
        "Consider reaching out to a professional counselor",
        "Practice mindfulness-based stress reduction",
        "Reduce your workload where you can",
        "Spend more time talking with family and friends",
        "Keep regular hours and a healthy lifestyle",
    ),
}

# Component name -> targeted suggestion
COMPONENT_SUGGESTIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("sadness",), "Write down one thing each day that went well"),
    (("anxiety", "fear"), "Try a slow 4-7-8 breathing cycle when worry builds up"),
    (("anger",), "Step away for a short walk before responding when irritated"),
)

DISCLAIMER = "Note: this assessment is for reference only. Please seek professional help if you need it."


@dataclass(frozen=True)
class Report:
    """Rendered report with the suggestions it contains."""

    report_text: str
    suggestions: tuple[str, ...]
    emotional_state: str


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


class ReportGenerator:
    """Builds the emotional-state report and suggestion list."""

    def emotional_state(self, positive: float, negative: float) -> str:
        """Pick the state label; checks run in a fixed order and the first match wins."""
        if positive > POSITIVE_STATE_THRESHOLD:
            return STATE_POSITIVE
        if negative > NEGATIVE_STATE_THRESHOLD:
            return STATE_LOW_MOOD
        if positive > negative:
            return STATE_STABLE
        return STATE_MILDLY_NEGATIVE

    def suggestions(self, risk_level: RiskLevel, components: dict[str, float] | None = None) -> tuple[str, ...]:
        items = list(RISK_SUGGESTIONS[risk_level])
        for names, suggestion in COMPONENT_SUGGESTIONS:
            if any((components or {}).get(name, 0.0) >= COMPONENT_SUGGESTION_THRESHOLD for name in names):
                items.append(suggestion)
        return tuple(items)

    def generate(
        self,
        scores: SentimentScores,
        stress_level: float,
        anxiety_level: float,
        risk_level: RiskLevel,
    ) -> Report:
        state = self.emotional_state(scores.positive, scores.negative)
        suggestions = self.suggestions(risk_level, scores.components)

        lines = [
            "Emotional Assessment Report",
            f"1. Emotional state: {state}",
            f"2. Risk level: {risk_level.value}",
            "3. Detailed analysis:",
            f"   - Positive emotion index: {_percent(scores.positive)}",
            f"   - Negative emotion index: {_percent(scores.negative)}",
            f"   - Stress level: {_percent(stress_level)}",
            f"   - Anxiety level: {_percent(anxiety_level)}",
            "",
            "4. Suggestions:",
            *(f"   - {item}" for item in suggestions),
            "",
            DISCLAIMER,
        ]
        return Report(report_text="\n".join(lines), suggestions=suggestions, emotional_state=state)
