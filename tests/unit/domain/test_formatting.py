"""Tests for confidence and timestamp formatting."""

from datetime import datetime, timedelta, timezone

import pytest

from review_sentiment.domain.policies.formatting import format_confidence, iso_timestamp


def test_confidence_one_decimal():
    assert format_confidence(0.952) == "95.2"
    assert format_confidence(0.98) == "98.0"


def test_confidence_bounds():
    assert format_confidence(0.0) == "0.0"
    assert format_confidence(1.0) == "100.0"


def test_confidence_rounds():
    assert format_confidence(0.99987) == "100.0"
    assert format_confidence(0.12345) == "12.3"


@pytest.mark.parametrize(
    "score, expected",
    [(0.0625, "6.3"), (0.8125, "81.3"), (0.9375, "93.8"), (0.5625, "56.3")],
)
def test_confidence_exact_ties_round_up(score, expected):
    assert format_confidence(score) == expected


def test_iso_timestamp_utc_with_z_suffix():
    moment = datetime(2026, 2, 6, 10, 30, 15, 123456, tzinfo=timezone.utc)
    assert iso_timestamp(moment) == "2026-02-06T10:30:15.123Z"


def test_iso_timestamp_converts_offsets_to_utc():
    moment = datetime(2026, 2, 6, 15, 0, 0, tzinfo=timezone(timedelta(hours=5)))
    assert iso_timestamp(moment) == "2026-02-06T10:00:00.000Z"


def test_iso_timestamp_now():
    value = iso_timestamp()
    assert value.endswith("Z")
    assert "T" in value
