"""TSV loader — reads review texts from a tab-separated file or URL."""

from __future__ import annotations

import asyncio
import csv
import io
import logging
import re
from pathlib import Path

import httpx

from review_sentiment.application.ports.review_source_port import ReviewSourcePort
from review_sentiment.domain.errors import ResourceLoadFailureError

logger = logging.getLogger(__name__)

TEXT_COLUMN = "text"


def normalize_column_name(name: str) -> str:
    """Normalize a TSV header cell.

    - Removes BOM characters (\\ufeff)
    - Strips leading/trailing whitespace (including non-breaking spaces)
    - Lowercases
    """
    name = name.replace("\ufeff", "")
    return name.strip().lower()


def parse_reviews(content: str) -> list[str]:
    """Extract non-empty, trimmed review texts from TSV content.

    The first line is the header; reviews come from the "text" column.
    Rows without a usable text cell are skipped.

    Raises:
        ValueError: if the header has no "text" column.
    """
    reader = csv.DictReader(io.StringIO(content), dialect=csv.excel_tab)
    if reader.fieldnames is None:
        raise ValueError("TSV content has no header row")

    col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
    if TEXT_COLUMN not in col_map.values():
        raise ValueError(f"TSV header has no '{TEXT_COLUMN}' column (columns: {list(col_map.values())})")

    reviews = []
    skipped = 0
    for raw_row in reader:
        row = {col_map[k]: v for k, v in raw_row.items() if k is not None}
        text = row.get(TEXT_COLUMN)
        if isinstance(text, str) and text.strip():
            reviews.append(text.strip())
        else:
            skipped += 1

    if skipped:
        logger.warning("Skipped %d rows without review text", skipped)
    return reviews


def _is_url(location: str) -> bool:
    return re.match(r"^https?://", location, re.IGNORECASE) is not None


class TsvReviewSource(ReviewSourcePort):
    """Reviews from a local TSV path or an http(s) URL."""

    def __init__(self, location: str, timeout: float = 30.0):
        self._location = location
        self._timeout = timeout

    async def load(self) -> list[str]:
        try:
            content = await self._fetch()
            reviews = parse_reviews(content)
        except (OSError, httpx.HTTPError, ValueError) as e:
            raise ResourceLoadFailureError(f"Failed to load TSV file: {e}") from e

        if not reviews:
            raise ResourceLoadFailureError("No valid reviews found in TSV file")

        logger.info("Loaded %d reviews from %s", len(reviews), self._location)
        return reviews

    async def _fetch(self) -> str:
        if _is_url(self._location):
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._location)
                response.raise_for_status()
                return response.text

        path = Path(self._location)
        return await asyncio.to_thread(path.read_text, encoding="utf-8-sig")
