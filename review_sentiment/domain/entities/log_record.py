"""LogRecord — flat row handed to the logging endpoint and forgotten."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class LogRecord:
    ts_iso: str
    review: str
    sentiment: str
    meta: str

    def to_payload(self) -> dict[str, str]:
        return asdict(self)

    def to_row(self) -> list[str]:
        """Cell order of the backing sheet: Timestamp, Review, Sentiment, Meta."""
        return [self.ts_iso, self.review, self.sentiment, self.meta]


SHEET_HEADER = ["Timestamp (ts_iso)", "Review", "Sentiment (with confidence)", "Meta"]
