"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from review_sentiment.adapters.persistence.database import get_session
from review_sentiment.application.context import DemoContext
from review_sentiment.infrastructure.api.dependencies import get_demo_context

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    session: AsyncSession = Depends(get_session),
    context: DemoContext = Depends(get_demo_context),
):
    """Check database connectivity and demo readiness."""
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {e}"

    return {
        "status": "ok" if db_status == "connected" and context.is_ready else "degraded",
        "database": db_status,
        "model": context.model_state.status.value,
        "reviews": context.dataset_state.status.value,
        "service": "Review Sentiment Analyzer",
    }
