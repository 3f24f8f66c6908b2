"""AnalyzeRandomReviewUseCase — pick one review, classify it, remember it."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from review_sentiment.application.context import DemoContext
from review_sentiment.application.use_cases.classify_review import classify
from review_sentiment.domain.entities.analysis_session import AnalysisRecord
from review_sentiment.domain.errors import EngineNotReadyError, ResourceLoadFailureError
from review_sentiment.domain.policies.formatting import iso_timestamp
from review_sentiment.domain.policies.sampling import pick_random

logger = logging.getLogger(__name__)


class AnalyzeRandomReviewUseCase:
    """Orchestrates the "analyze" action of the demo."""

    def __init__(
        self,
        context: DemoContext,
        rng: random.Random | None = None,
        clock: Callable[[], str] = iso_timestamp,
    ):
        self._ctx = context
        self._rng = rng
        self._clock = clock

    async def execute(self) -> AnalysisRecord:
        """Analyze one random review and store it as the current analysis.

        The stored timestamp is the classification time; a later log
        action reuses it unchanged.
        """
        if self._ctx.has_failed:
            raise ResourceLoadFailureError("Startup failed; reload to try again")
        if not self._ctx.is_ready:
            raise EngineNotReadyError("Model or reviews not loaded yet")

        review = pick_random(self._ctx.reviews, self._rng)
        result = await classify(review, self._ctx.engine)

        analysis = AnalysisRecord(review_text=review, result=result, timestamp_iso=self._clock())
        self._ctx.session.record(analysis)

        logger.info(
            "Analyzed review: %s %s%% → %s",
            result.label, result.confidence_percent, result.sentiment.value,
        )
        return analysis
