"""Shared formatting helpers — confidence percentages and ISO timestamps."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal


def format_confidence(score: float) -> str:
    """Render a [0, 1] score as a percentage with exactly one decimal ("95.2").

    Ties round up on the exact binary value (0.0625 → "6.3").
    """
    return str(Decimal(score * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def iso_timestamp(moment: datetime | None = None) -> str:
    """UTC ISO-8601 timestamp with millisecond precision and a "Z" suffix.

    Naive datetimes are taken to be UTC already.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
