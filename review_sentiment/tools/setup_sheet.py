"""Recreate the log sheet with only its header row.

Usage:
    python -m review_sentiment.tools.setup_sheet
    python -m review_sentiment.tools.setup_sheet --sheet Logs
    python -m review_sentiment.tools.setup_sheet --show  # print rows instead
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from review_sentiment.adapters.persistence.database import async_session_factory, create_tables, engine
from review_sentiment.adapters.persistence.repositories import SqlSheetStore
from review_sentiment.config import settings
from review_sentiment.domain.entities.log_record import SHEET_HEADER

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def setup(sheet_name: str) -> None:
    """Drop the sheet if present and recreate it with the header row."""
    await create_tables()
    async with async_session_factory() as session:
        store = SqlSheetStore(session)
        await store.reset_sheet(sheet_name, SHEET_HEADER)
        await session.commit()
    logger.info("Sheet '%s' setup complete", sheet_name)


async def show(sheet_name: str) -> int:
    """Print every row of the sheet as tab-separated cells."""
    async with async_session_factory() as session:
        rows = await SqlSheetStore(session).get_rows(sheet_name)
    for row in rows:
        print("\t".join(row))
    return len(rows)


async def _main(args: argparse.Namespace) -> int:
    try:
        if args.show:
            count = await show(args.sheet)
            logger.info("%d rows in sheet '%s'", count, args.sheet)
        else:
            await setup(args.sheet)
    finally:
        await engine.dispose()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Set up the review sentiment log sheet")
    parser.add_argument("--sheet", default=settings.sheet_name, help="Sheet name (default: %(default)s)")
    parser.add_argument("--show", action="store_true", help="Print the sheet rows instead of resetting")
    args = parser.parse_args(argv)
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
