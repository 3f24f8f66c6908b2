"""Review Sentiment Analyzer — FastAPI application factory."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from review_sentiment.adapters.persistence.database import create_tables, engine
from review_sentiment.application.context import DemoContext
from review_sentiment.application.use_cases.start_demo import StartDemoUseCase
from review_sentiment.config import settings, setup_logging
from review_sentiment.domain.errors import ResourceLoadFailureError
from review_sentiment.infrastructure.api.dependencies import get_demo_context
from review_sentiment.infrastructure.api.routes_demo import router as demo_router
from review_sentiment.infrastructure.api.routes_health import router as health_router
from review_sentiment.infrastructure.api.routes_logging import router as logging_router

logger = logging.getLogger(__name__)


async def _start_demo(context: DemoContext) -> None:
    try:
        await StartDemoUseCase(context).execute()
    except ResourceLoadFailureError as e:
        # Analyze stays disabled until restart
        logger.error("%s", e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        await create_tables()
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)

    # Serve /demo/status while the dataset and model load in the background
    startup = None
    if settings.preload_on_startup:
        startup = asyncio.create_task(_start_demo(get_demo_context()))
    yield
    if startup is not None and not startup.done():
        startup.cancel()
    await engine.dispose()


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="Review Sentiment Analyzer",
        description="Random review sentiment classification with best-effort spreadsheet logging",
        version="0.1.0",
        lifespan=lifespan,
    )

    # The logging endpoint is posted to cross-origin by browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(demo_router, prefix="/api")
    app.include_router(logging_router, prefix="/api")

    return app


app = create_app()
