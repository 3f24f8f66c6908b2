"""LogRecordBuilder — flatten the current analysis into one loggable row."""

from __future__ import annotations

import json
from collections.abc import Callable

from review_sentiment.domain.entities.analysis_session import AnalysisSession
from review_sentiment.domain.entities.log_record import LogRecord
from review_sentiment.domain.errors import NoAnalysisAvailableError
from review_sentiment.domain.policies.formatting import iso_timestamp
from review_sentiment.domain.value_objects.client_metadata import ClientMetadata


def build_log_record(
    session: AnalysisSession,
    env: ClientMetadata,
    review_count: int,
    *,
    model_name: str,
    clock: Callable[[], str] = iso_timestamp,
) -> LogRecord:
    """Build the LogRecord for the session's current analysis.

    ts_iso is the time the review was classified; the logging time only
    appears inside meta, so the two stay distinguishable.

    Args:
        session: session holding the analysis to log.
        env: client environment metadata.
        review_count: size of the loaded dataset at logging time.
        model_name: identifier of the inference model.
        clock: returns the current ISO timestamp.

    Raises:
        NoAnalysisAvailableError: if nothing has been analyzed yet.
    """
    analysis = session.current
    if analysis is None:
        raise NoAnalysisAvailableError("No analysis to log")

    result = analysis.result
    now = clock()
    meta = {
        "userAgent": env.user_agent,
        "language": env.language,
        "platform": env.platform,
        "screenResolution": env.screen_resolution,
        "model": model_name,
        "timestamp": now,
        "reviewCount": review_count,
        "analysisTime": now,
        "analysis": result.as_dict(),
    }

    return LogRecord(
        ts_iso=analysis.timestamp_iso,
        review=analysis.review_text,
        sentiment=f"{result.label} ({result.confidence_percent}%)",
        meta=json.dumps(meta, ensure_ascii=False),
    )
