"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class LoadStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"
