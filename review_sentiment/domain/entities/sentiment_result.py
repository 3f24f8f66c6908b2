"""SentimentResult — normalized three-way judgment for one review."""

from dataclasses import dataclass

from review_sentiment.domain.value_objects.enums import Sentiment


@dataclass(frozen=True)
class SentimentResult:
    label: str
    score: float
    sentiment: Sentiment
    confidence_percent: str

    def as_dict(self) -> dict:
        return {
            "label": self.label,
            "score": self.score,
            "sentiment": self.sentiment.value,
            "confidence": self.confidence_percent,
        }
