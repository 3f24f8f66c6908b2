"""AnalysisSession — the most recently analyzed review, if any."""

from __future__ import annotations

from dataclasses import dataclass

from review_sentiment.domain.entities.sentiment_result import SentimentResult


@dataclass(frozen=True)
class AnalysisRecord:
    review_text: str
    result: SentimentResult
    timestamp_iso: str


@dataclass
class AnalysisSession:
    """Holds at most one current AnalysisRecord.

    Written only by the analyze action, read only by the log action.
    """

    current: AnalysisRecord | None = None

    def record(self, analysis: AnalysisRecord) -> None:
        self.current = analysis

    def is_empty(self) -> bool:
        return self.current is None
