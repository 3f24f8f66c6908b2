"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from review_sentiment.adapters.inference.transformers_adapter import TransformersAdapter
from review_sentiment.adapters.log_sink.http_sink import HttpLogSink
from review_sentiment.adapters.persistence.database import get_session
from review_sentiment.adapters.persistence.repositories import SqlSheetStore
from review_sentiment.adapters.tsv_loader.loader import TsvReviewSource
from review_sentiment.application.context import DemoContext
from review_sentiment.application.ports.log_sink_port import LogSinkPort
from review_sentiment.application.use_cases.analyze_random_review import AnalyzeRandomReviewUseCase
from review_sentiment.application.use_cases.append_log_row import AppendLogRowUseCase
from review_sentiment.application.use_cases.log_analysis import LogAnalysisUseCase
from review_sentiment.config import settings

# One demo session per process; the model loads lazily at startup
_demo_context = DemoContext(
    engine=TransformersAdapter(),
    review_source=TsvReviewSource(settings.reviews_source),
)
_log_sink = HttpLogSink()


def get_demo_context() -> DemoContext:
    return _demo_context


def get_log_sink() -> LogSinkPort:
    return _log_sink


def get_sheet_store(session: AsyncSession = Depends(get_session)) -> SqlSheetStore:
    return SqlSheetStore(session)


def get_analyze_uc(
    context: DemoContext = Depends(get_demo_context),
) -> AnalyzeRandomReviewUseCase:
    return AnalyzeRandomReviewUseCase(context)


def get_log_analysis_uc(
    context: DemoContext = Depends(get_demo_context),
    sink: LogSinkPort = Depends(get_log_sink),
) -> LogAnalysisUseCase:
    return LogAnalysisUseCase(context, sink, model_name=context.engine.model_name)


def get_append_log_row_uc(
    store: SqlSheetStore = Depends(get_sheet_store),
) -> AppendLogRowUseCase:
    return AppendLogRowUseCase(store, settings.sheet_name)
