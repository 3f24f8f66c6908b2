"""Tests for StartDemoUseCase — concurrent startup and the readiness gate."""

import pytest

from review_sentiment.application.context import DemoContext
from review_sentiment.application.use_cases.start_demo import StartDemoUseCase
from review_sentiment.domain.errors import ResourceLoadFailureError
from review_sentiment.domain.value_objects.enums import LoadStatus
from tests.fakes import FakeEngine, FakeReviewSource


@pytest.mark.asyncio
async def test_both_resources_load():
    context = DemoContext(engine=FakeEngine(ready=False), review_source=FakeReviewSource())
    assert not context.is_ready

    await StartDemoUseCase(context).execute()

    assert context.is_ready
    assert context.reviews == ["Great product!", "Terrible experience."]
    assert context.dataset_state.message == "Loaded 2 reviews"
    assert context.model_state.message == "Model loaded and ready"
    assert context.model_state.progress == 1.0


@pytest.mark.asyncio
async def test_dataset_failure_keeps_gate_closed():
    context = DemoContext(
        engine=FakeEngine(ready=False),
        review_source=FakeReviewSource(error=ResourceLoadFailureError("No valid reviews found in TSV file")),
    )

    with pytest.raises(ResourceLoadFailureError):
        await StartDemoUseCase(context).execute()

    assert not context.is_ready
    assert context.has_failed
    assert context.dataset_state.status == LoadStatus.FAILED
    # The model still loaded independently
    assert context.model_state.status == LoadStatus.READY


@pytest.mark.asyncio
async def test_model_failure_reported():
    context = DemoContext(
        engine=FakeEngine(ready=False, fail_init=RuntimeError("404 model not found")),
        review_source=FakeReviewSource(),
    )

    with pytest.raises(ResourceLoadFailureError, match="Model loading failed"):
        await StartDemoUseCase(context).execute()

    assert context.model_state.status == LoadStatus.FAILED
    assert context.model_state.message == "Failed to load model"
    assert context.dataset_state.status == LoadStatus.READY
    assert not context.is_ready


@pytest.mark.asyncio
async def test_download_progress_message():
    seen = []

    class RecordingEngine(FakeEngine):
        async def initialize(self, on_progress=None):
            on_progress({"status": "downloading", "progress": 0.42})
            seen.append(context.model_state.message)
            self._ready = True

    context = DemoContext(engine=RecordingEngine(ready=False), review_source=FakeReviewSource())
    await StartDemoUseCase(context).execute()

    assert seen == ["Downloading model: 42%"]
