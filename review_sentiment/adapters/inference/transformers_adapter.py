"""Transformers adapter — implements InferencePort with a Hugging Face pipeline."""

from __future__ import annotations

import asyncio
import logging

from huggingface_hub import snapshot_download
from tqdm.auto import tqdm
from transformers import pipeline

from review_sentiment.application.ports.inference_port import InferencePort, ProgressCallback
from review_sentiment.config import settings
from review_sentiment.domain.errors import EngineNotReadyError, InvalidEngineOutputError
from review_sentiment.domain.value_objects.raw_classification import RawClassification

logger = logging.getLogger(__name__)

TASK = "text-classification"

# Files the pipeline needs: config, tokenizer and weights.
DOWNLOAD_PATTERNS = ["*.json", "*.txt", "*.model", "*.safetensors"]


class TransformersAdapter(InferencePort):
    """Text classification with a locally executed transformers pipeline.

    The model is fetched lazily by initialize(); the blocking pipeline
    calls run in a worker thread so the event loop stays responsive.
    """

    def __init__(self, model_name: str | None = None, device: int = -1):
        self._model_name = model_name or settings.model_name
        self._device = device
        self._pipe = None

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def is_ready(self) -> bool:
        return self._pipe is not None

    async def initialize(self, on_progress: ProgressCallback | None = None) -> None:
        if self._pipe is not None:
            return

        _notify(on_progress, {"status": "initiate", "name": self._model_name})
        await asyncio.to_thread(
            snapshot_download,
            self._model_name,
            allow_patterns=DOWNLOAD_PATTERNS,
            tqdm_class=_progress_bar_class(on_progress, self._model_name),
        )
        self._pipe = await asyncio.to_thread(
            pipeline, TASK, model=self._model_name, device=self._device
        )
        _notify(on_progress, {"status": "ready", "name": self._model_name, "progress": 1.0})
        logger.info("Pipeline '%s' ready with model %s", TASK, self._model_name)

    async def classify(self, text: str) -> list[RawClassification]:
        if self._pipe is None:
            raise EngineNotReadyError("Sentiment model not loaded")

        raw = await asyncio.to_thread(self._pipe, text, truncation=True)
        return self._to_classifications(raw)

    @staticmethod
    def _to_classifications(raw) -> list[RawClassification]:
        """Convert pipeline output to RawClassifications, best first.

        A single string input yields [{"label", "score"}, ...]; some
        pipeline configurations nest that list once more.
        """
        if not isinstance(raw, list):
            raise InvalidEngineOutputError(f"Unexpected pipeline output: {raw!r}")

        entries = raw[0] if raw and isinstance(raw[0], list) else raw
        classifications = []
        for entry in entries:
            if not isinstance(entry, dict) or "label" not in entry or "score" not in entry:
                raise InvalidEngineOutputError(f"Unexpected pipeline entry: {entry!r}")
            classifications.append(
                RawClassification(label=str(entry["label"]), score=float(entry["score"]))
            )

        return sorted(classifications, key=lambda c: c.score, reverse=True)


def _notify(on_progress: ProgressCallback | None, event: dict) -> None:
    if on_progress is not None:
        on_progress(event)


def _progress_bar_class(on_progress: ProgressCallback | None, model_name: str) -> type[tqdm]:
    """tqdm subclass that forwards snapshot_download progress as "downloading" events.

    Counts completed units itself: a disabled tqdm does not advance ``n``.
    """

    class _ProgressBar(tqdm):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self._done = 0

        def update(self, n=1):
            result = super().update(n)
            self._done += n or 0
            if self.total:
                _notify(
                    on_progress,
                    {
                        "status": "downloading",
                        "name": model_name,
                        "progress": min(self._done / self.total, 1.0),
                    },
                )
            return result

    return _ProgressBar
