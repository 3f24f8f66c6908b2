"""AppendLogRowUseCase — the logging endpoint: one JSON record in, one row out."""

from __future__ import annotations

import json
import logging

from review_sentiment.application.ports.sheet_store_port import SheetStore
from review_sentiment.domain.entities.log_ack import LogAck
from review_sentiment.domain.entities.log_record import SHEET_HEADER

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("ts_iso", "review", "sentiment", "meta")


class AppendLogRowUseCase:
    """Parses a posted log record and appends it to the named sheet.

    Never raises: every failure is reported in the returned LogAck.
    """

    def __init__(self, store: SheetStore, sheet_name: str):
        self._store = store
        self._sheet_name = sheet_name

    async def execute(self, body: str | bytes) -> LogAck:
        try:
            data = json.loads(body)
            if not isinstance(data, dict):
                raise ValueError("Expected a JSON object")

            row = [_cell(data.get(name)) for name in RECORD_FIELDS]
            row_number = await self._store.append_row(self._sheet_name, SHEET_HEADER, row)
        except Exception as e:
            logger.exception("Failed to append log row to sheet '%s'", self._sheet_name)
            return LogAck(success=False, error=str(e))

        logger.info("Appended log row %d to sheet '%s'", row_number, self._sheet_name)
        return LogAck(success=True, message="Data logged successfully", row=row_number)


def _cell(value) -> str:
    """Missing fields become blank cells; non-strings are JSON-encoded."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)
