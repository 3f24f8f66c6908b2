"""Tests for AppendLogRowUseCase — the logging endpoint logic."""

import json

import pytest

from review_sentiment.application.use_cases.append_log_row import AppendLogRowUseCase
from review_sentiment.domain.entities.log_record import SHEET_HEADER
from tests.fakes import FakeSheetStore

PAYLOAD = {
    "ts_iso": "2026-02-06T10:00:00.000Z",
    "review": "This is a test review for sentiment analysis.",
    "sentiment": "POSITIVE (95.2%)",
    "meta": json.dumps({"userAgent": "Test Agent", "test": True}),
}


@pytest.mark.asyncio
async def test_first_append_creates_sheet_with_header(fake_sheet_store):
    ack = await AppendLogRowUseCase(fake_sheet_store, "Logs").execute(json.dumps(PAYLOAD))

    assert ack.success
    assert ack.row == 2
    assert ack.message == "Data logged successfully"
    rows = fake_sheet_store.sheets["Logs"]
    assert rows[0] == SHEET_HEADER
    assert rows[1] == [PAYLOAD["ts_iso"], PAYLOAD["review"], PAYLOAD["sentiment"], PAYLOAD["meta"]]


@pytest.mark.asyncio
async def test_rows_numbered_sequentially(fake_sheet_store):
    use_case = AppendLogRowUseCase(fake_sheet_store, "Logs")
    await use_case.execute(json.dumps(PAYLOAD))
    ack = await use_case.execute(json.dumps(PAYLOAD).encode())
    assert ack.row == 3


@pytest.mark.asyncio
async def test_missing_fields_are_blank(fake_sheet_store):
    await AppendLogRowUseCase(fake_sheet_store, "Logs").execute(json.dumps({"review": "only review"}))
    assert fake_sheet_store.sheets["Logs"][1] == ["", "only review", "", ""]


@pytest.mark.asyncio
async def test_non_string_meta_encoded(fake_sheet_store):
    await AppendLogRowUseCase(fake_sheet_store, "Logs").execute(json.dumps({"meta": {"a": 1}}))
    assert fake_sheet_store.sheets["Logs"][1][3] == '{"a": 1}'


@pytest.mark.asyncio
@pytest.mark.parametrize("body", ["not json", "[1, 2]", ""])
async def test_bad_body_returns_error_ack(fake_sheet_store, body):
    ack = await AppendLogRowUseCase(fake_sheet_store, "Logs").execute(body)
    assert not ack.success
    assert ack.error
    assert fake_sheet_store.sheets == {}


@pytest.mark.asyncio
async def test_store_failure_returns_error_ack():
    store = FakeSheetStore(error=RuntimeError("disk full"))
    ack = await AppendLogRowUseCase(store, "Logs").execute(json.dumps(PAYLOAD))
    assert ack.to_dict() == {"success": False, "error": "disk full"}
