"""SentimentRule — derive positive / negative / neutral from one engine label."""

from __future__ import annotations

from review_sentiment.domain.value_objects.enums import Sentiment

# Strictly greater: a score of exactly 0.5 is neutral.
CONFIDENCE_THRESHOLD = 0.5


def derive_sentiment(label: str, score: float) -> Sentiment:
    """Map an engine label and score to a three-way sentiment.

    1. Upper-case the label (comparison only).
    2. "POSITIVE" substring and score > 0.5 → positive.
    3. "NEGATIVE" substring and score > 0.5 → negative.
    4. Anything else → neutral.
    """
    normalized = label.upper()
    if "POSITIVE" in normalized and score > CONFIDENCE_THRESHOLD:
        return Sentiment.POSITIVE
    if "NEGATIVE" in normalized and score > CONFIDENCE_THRESHOLD:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
