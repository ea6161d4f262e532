"""
MindPulse emotion assessment engine.

Scores free-form text for sentiment, stress and anxiety, classifies a risk
tier, renders a report, and routes the result to local and remote storage
according to the user's data-sharing preference.
"""

__version__ = "0.1.0"
