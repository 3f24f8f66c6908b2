"""Demo endpoints — the analyze and log actions plus load status."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from review_sentiment.application.context import DemoContext, ResourceState
from review_sentiment.application.use_cases.analyze_random_review import AnalyzeRandomReviewUseCase
from review_sentiment.application.use_cases.log_analysis import LogAnalysisUseCase
from review_sentiment.domain.errors import (
    EmptyDatasetError,
    EndpointNotConfiguredError,
    EndpointUnreachableError,
    EngineNotReadyError,
    InvalidEngineOutputError,
    InvalidInputError,
    NoAnalysisAvailableError,
    ResourceLoadFailureError,
    SentimentDemoError,
)
from review_sentiment.domain.value_objects.client_metadata import ClientMetadata
from review_sentiment.infrastructure.api.dependencies import (
    get_analyze_uc,
    get_demo_context,
    get_log_analysis_uc,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/demo", tags=["demo"])

_ERROR_STATUS: dict[type[SentimentDemoError], int] = {
    InvalidInputError: 422,
    NoAnalysisAvailableError: 409,
    EmptyDatasetError: 409,
    EngineNotReadyError: 503,
    ResourceLoadFailureError: 503,
    EndpointNotConfiguredError: 503,
    InvalidEngineOutputError: 502,
    EndpointUnreachableError: 502,
}


# ── Request schemas ─────────────────────────────────────────────────

class LogRequest(BaseModel):
    platform: str = ""
    language: str | None = None
    screen_width: int = 0
    screen_height: int = 0


# ── Helpers ─────────────────────────────────────────────────────────

def _to_http(prefix: str, error: SentimentDemoError) -> HTTPException:
    status_code = next(
        (code for cls, code in _ERROR_STATUS.items() if isinstance(error, cls)), 500
    )
    return HTTPException(status_code=status_code, detail=f"{prefix}: {error}")


def _primary_language(accept_language: str) -> str:
    """First tag of an Accept-Language header ("en-US,en;q=0.9" → "en-US")."""
    first = accept_language.split(",")[0]
    return first.split(";")[0].strip()


def _state_to_dict(state: ResourceState) -> dict:
    return {"status": state.status.value, "message": state.message, "progress": state.progress}


# ── Routes ──────────────────────────────────────────────────────────

@router.get("/status")
async def demo_status(context: DemoContext = Depends(get_demo_context)):
    """Load status of the dataset and model and which actions are available."""
    return {
        "reviews": {**_state_to_dict(context.dataset_state), "count": len(context.reviews)},
        "model": {**_state_to_dict(context.model_state), "name": context.engine.model_name},
        "can_analyze": context.is_ready,
        "can_log": context.can_log,
    }


@router.post("/analyze")
async def analyze_random_review(
    use_case: AnalyzeRandomReviewUseCase = Depends(get_analyze_uc),
):
    """Pick a random review, classify it and keep it as the current analysis."""
    try:
        analysis = await use_case.execute()
    except SentimentDemoError as e:
        logger.warning("Analysis failed: %s", e)
        raise _to_http("Analysis failed", e) from e

    return {
        "review": analysis.review_text,
        "result": analysis.result.as_dict(),
        "timestamp": analysis.timestamp_iso,
    }


@router.post("/log")
async def log_current_analysis(
    request: Request,
    body: LogRequest | None = None,
    use_case: LogAnalysisUseCase = Depends(get_log_analysis_uc),
):
    """Send the current analysis to the logging endpoint (best-effort)."""
    body = body or LogRequest()
    env = ClientMetadata(
        user_agent=request.headers.get("user-agent", ""),
        language=body.language or _primary_language(request.headers.get("accept-language", "")),
        platform=body.platform,
        screen_width=body.screen_width,
        screen_height=body.screen_height,
    )

    try:
        record = await use_case.execute(env)
    except SentimentDemoError as e:
        logger.warning("Logging failed: %s", e)
        raise _to_http("Failed to log analysis", e) from e

    return {
        "status": "sent",
        # The endpoint's acknowledgment is never read
        "confirmed": False,
        "record": record.to_payload(),
    }
