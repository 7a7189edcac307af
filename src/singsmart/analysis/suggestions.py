"""Practice suggestions derived from voice analysis scores."""

import structlog

logger = structlog.get_logger()

# (score attribute, threshold, suggestions shown when the score is below it)
SUGGESTION_RULES: list[tuple[str, float, list[str]]] = [
    (
        "pitch_accuracy",
        80.0,
        [
            "Focus on listening to the target note before singing it",
            "Practice scales slowly to improve pitch accuracy",
        ],
    ),
    (
        "tone_stability",
        75.0,
        [
            "Try relaxing your jaw and throat for a more open tone",
            "Practice vowel modification exercises",
        ],
    ),
    (
        "breathing_consistency",
        70.0,
        [
            "Work on diaphragmatic breathing exercises",
            "Practice sustained notes to build breath control",
        ],
    ),
]

ENCOURAGEMENT = [
    "Great progress! Keep practicing consistently",
    "Try challenging yourself with more difficult exercises",
]


def generate_suggestions(
    pitch_accuracy: float,
    tone_stability: float,
    breathing_consistency: float,
) -> list[str]:
    """Return targeted advice for each weak area, or encouragement.

    Args:
        pitch_accuracy: 0-100.
        tone_stability: 0-100.
        breathing_consistency: 0-100.

    Returns:
        Ordered suggestions, pitch first, then tone, then breathing.
    """
    scores = {
        "pitch_accuracy": pitch_accuracy,
        "tone_stability": tone_stability,
        "breathing_consistency": breathing_consistency,
    }
    suggestions: list[str] = []
    for name, threshold, advice in SUGGESTION_RULES:
        if scores[name] < threshold:
            suggestions.extend(advice)
    if not suggestions:
        suggestions = list(ENCOURAGEMENT)
    logger.debug("suggestions_generated", count=len(suggestions))
    return suggestions
