"""LogAnalysisUseCase — build the log record and hand it to the sink."""

from __future__ import annotations

import logging

from review_sentiment.application.context import DemoContext
from review_sentiment.application.ports.log_sink_port import LogSinkPort
from review_sentiment.domain.entities.log_record import LogRecord
from review_sentiment.domain.policies.log_record_builder import build_log_record
from review_sentiment.domain.value_objects.client_metadata import ClientMetadata

logger = logging.getLogger(__name__)


class LogAnalysisUseCase:
    """Orchestrates the "log" action of the demo.

    Delivery is best-effort: a normal return means the record was sent,
    not that the endpoint stored it.
    """

    def __init__(self, context: DemoContext, sink: LogSinkPort, model_name: str):
        self._ctx = context
        self._sink = sink
        self._model_name = model_name

    async def execute(self, env: ClientMetadata) -> LogRecord:
        record = build_log_record(
            self._ctx.session,
            env,
            len(self._ctx.reviews),
            model_name=self._model_name,
        )
        await self._sink.send(record)
        logger.info("Log record sent: %s | %s", record.ts_iso, record.sentiment)
        return record
