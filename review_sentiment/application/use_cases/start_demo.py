"""StartDemoUseCase — load dataset and model concurrently, then open the gate."""

from __future__ import annotations

import asyncio
import logging

from review_sentiment.application.context import DemoContext
from review_sentiment.domain.errors import ResourceLoadFailureError

logger = logging.getLogger(__name__)


class StartDemoUseCase:
    """Runs the two independent startup loads and joins on both."""

    def __init__(self, context: DemoContext):
        self._ctx = context

    async def execute(self) -> DemoContext:
        """Load reviews and the inference model in parallel.

        Both loads always run to completion so each resource reports its
        own status. If either fails the context stays closed for analysis
        and ResourceLoadFailureError is raised; there is no in-process
        recovery.
        """
        results = await asyncio.gather(
            self._load_reviews(),
            self._load_model(),
            return_exceptions=True,
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            raise ResourceLoadFailureError(
                "Failed to initialize application: "
                + "; ".join(str(f) for f in failures)
            ) from failures[0]

        logger.info("Demo ready: %d reviews, model %s", len(self._ctx.reviews), self._ctx.engine.model_name)
        return self._ctx

    async def _load_reviews(self) -> None:
        state = self._ctx.dataset_state
        try:
            reviews = await self._ctx.review_source.load()
        except Exception as e:
            state.mark_failed("Failed to load reviews")
            logger.error("Review dataset failed to load: %s", e)
            raise

        self._ctx.reviews = reviews
        state.mark_ready(f"Loaded {len(reviews)} reviews")
        logger.info("Successfully loaded %d reviews", len(reviews))

    async def _load_model(self) -> None:
        state = self._ctx.model_state
        engine = self._ctx.engine

        def on_progress(event: dict) -> None:
            if event.get("status") == "downloading":
                progress = float(event.get("progress") or 0.0)
                state.progress = progress
                state.message = f"Downloading model: {round(progress * 100)}%"

        logger.info("Loading sentiment analysis model %s...", engine.model_name)
        try:
            await engine.initialize(on_progress)
        except Exception as e:
            state.mark_failed("Failed to load model")
            logger.error("Model loading failed: %s", e)
            raise ResourceLoadFailureError(f"Model loading failed: {e}") from e

        state.progress = 1.0
        state.mark_ready("Model loaded and ready")
        logger.info("Sentiment analysis model loaded successfully")
