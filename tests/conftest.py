"""Pytest configuration and shared fixtures."""

import pytest

from review_sentiment.application.context import DemoContext
from review_sentiment.domain.value_objects.raw_classification import RawClassification
from tests.fakes import FakeEngine, FakeReviewSource, FakeSheetStore, FakeSink


@pytest.fixture
def fake_engine():
    return FakeEngine(
        responses={
            "Great product!": [RawClassification("POSITIVE", 0.98)],
            "Terrible experience.": [RawClassification("NEGATIVE", 0.4)],
        }
    )


@pytest.fixture
def fake_sink():
    return FakeSink()


@pytest.fixture
def fake_sheet_store():
    return FakeSheetStore()


@pytest.fixture
def demo_context(fake_engine):
    """Context with both resources already loaded."""
    context = DemoContext(engine=fake_engine, review_source=FakeReviewSource())
    context.reviews = ["Great product!", "Terrible experience."]
    context.dataset_state.mark_ready("Loaded 2 reviews")
    context.model_state.mark_ready("Model loaded and ready")
    return context
