"""Classifier adapter — turn raw engine output into a SentimentResult."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from review_sentiment.application.ports.inference_port import InferencePort
from review_sentiment.domain.entities.sentiment_result import SentimentResult
from review_sentiment.domain.errors import (
    EngineNotReadyError,
    InvalidEngineOutputError,
    InvalidInputError,
)
from review_sentiment.domain.policies.formatting import format_confidence
from review_sentiment.domain.policies.sentiment_rule import derive_sentiment
from review_sentiment.domain.value_objects.raw_classification import RawClassification

logger = logging.getLogger(__name__)


async def classify(text: str, engine: InferencePort) -> SentimentResult:
    """Classify one text with the engine's highest-confidence label.

    Raises:
        InvalidInputError: text is empty after trimming (checked first).
        EngineNotReadyError: engine has not been initialized.
        InvalidEngineOutputError: engine returned nothing usable.
    """
    if not text or not text.strip():
        raise InvalidInputError("Review text is empty")

    if not engine.is_ready:
        raise EngineNotReadyError("Sentiment model not loaded")

    results = await engine.classify(text)

    if not isinstance(results, Sequence) or isinstance(results, (str, bytes)) or not results:
        raise InvalidEngineOutputError("Invalid analysis results")

    primary = results[0]
    if not isinstance(primary, RawClassification):
        raise InvalidEngineOutputError(f"Unexpected classification entry: {primary!r}")

    sentiment = derive_sentiment(primary.label, primary.score)
    logger.debug("Classified %r as %s (%s, %.4f)", text[:40], sentiment.value, primary.label, primary.score)

    return SentimentResult(
        label=primary.label,
        score=primary.score,
        sentiment=sentiment,
        confidence_percent=format_confidence(primary.score),
    )
