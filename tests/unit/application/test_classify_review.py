"""Tests for the classifier adapter (classify)."""

import pytest

from review_sentiment.application.use_cases.classify_review import classify
from review_sentiment.domain.errors import (
    EngineNotReadyError,
    InvalidEngineOutputError,
    InvalidInputError,
)
from review_sentiment.domain.value_objects.enums import Sentiment
from review_sentiment.domain.value_objects.raw_classification import RawClassification
from tests.fakes import FakeEngine

# ─── Input validation ───────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
async def test_empty_text_rejected(text):
    engine = FakeEngine()
    with pytest.raises(InvalidInputError):
        await classify(text, engine)
    assert engine.calls == []


@pytest.mark.asyncio
async def test_empty_text_rejected_even_when_engine_not_ready():
    with pytest.raises(InvalidInputError):
        await classify("", FakeEngine(ready=False))


@pytest.mark.asyncio
async def test_engine_not_ready():
    with pytest.raises(EngineNotReadyError):
        await classify("Great product!", FakeEngine(ready=False))


# ─── Engine output validation ───────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize("output", [[], None, "POSITIVE", {"label": "POSITIVE", "score": 0.9}])
async def test_invalid_engine_output(output):
    engine = FakeEngine()
    engine._default = output
    with pytest.raises(InvalidEngineOutputError):
        await classify("Great product!", engine)


@pytest.mark.asyncio
async def test_malformed_entry_rejected():
    engine = FakeEngine(default=[{"label": "POSITIVE"}])
    with pytest.raises(InvalidEngineOutputError):
        await classify("Great product!", engine)


# ─── Derivation ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_great_product_end_to_end(fake_engine):
    result = await classify("Great product!", fake_engine)
    assert result.label == "POSITIVE"
    assert result.score == 0.98
    assert result.sentiment == Sentiment.POSITIVE
    assert result.confidence_percent == "98.0"


@pytest.mark.asyncio
async def test_negative_below_threshold_is_neutral(fake_engine):
    result = await classify("Terrible experience.", fake_engine)
    assert result.sentiment == Sentiment.NEUTRAL
    assert result.confidence_percent == "40.0"


@pytest.mark.asyncio
async def test_first_entry_wins_and_label_case_kept():
    engine = FakeEngine(default=[RawClassification("negative", 0.952), RawClassification("positive", 0.048)])
    result = await classify("meh", engine)
    assert result.label == "negative"
    assert result.sentiment == Sentiment.NEGATIVE
    assert result.confidence_percent == "95.2"


@pytest.mark.asyncio
async def test_engine_called_once(fake_engine):
    await classify("Great product!", fake_engine)
    assert fake_engine.calls == ["Great product!"]
