"""SQLAlchemy implementation of the SheetStore port."""

from __future__ import annotations

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from review_sentiment.adapters.persistence.models import SheetModel, SheetRowModel
from review_sentiment.application.ports.sheet_store_port import SheetStore

logger = logging.getLogger(__name__)


class SqlSheetStore(SheetStore):
    """Sheets and rows in two tables. The caller owns the transaction."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def append_row(self, sheet_name: str, header: list[str], row: list[str]) -> int:
        sheet = await self._get_sheet(sheet_name)
        if sheet is None:
            sheet = await self._create_sheet(sheet_name, header)

        last_row = await self._session.scalar(
            select(func.max(SheetRowModel.row_number)).where(SheetRowModel.sheet_id == sheet.id)
        )
        row_number = (last_row or 0) + 1
        self._session.add(SheetRowModel(sheet_id=sheet.id, row_number=row_number, cells=list(row)))
        await self._session.flush()
        return row_number

    async def reset_sheet(self, sheet_name: str, header: list[str]) -> None:
        existing = await self._get_sheet(sheet_name)
        if existing is not None:
            await self._session.execute(
                delete(SheetRowModel).where(SheetRowModel.sheet_id == existing.id)
            )
            await self._session.execute(delete(SheetModel).where(SheetModel.id == existing.id))
            await self._session.flush()
            logger.info("Removed existing sheet '%s'", sheet_name)

        await self._create_sheet(sheet_name, header)

    async def get_rows(self, sheet_name: str) -> list[list[str]]:
        result = await self._session.execute(
            select(SheetRowModel.cells)
            .join(SheetModel, SheetModel.id == SheetRowModel.sheet_id)
            .where(SheetModel.name == sheet_name)
            .order_by(SheetRowModel.row_number)
        )
        return [list(cells) for cells in result.scalars().all()]

    async def _get_sheet(self, sheet_name: str) -> SheetModel | None:
        result = await self._session.execute(select(SheetModel).where(SheetModel.name == sheet_name))
        return result.scalar_one_or_none()

    async def _create_sheet(self, sheet_name: str, header: list[str]) -> SheetModel:
        sheet = SheetModel(name=sheet_name)
        self._session.add(sheet)
        await self._session.flush()
        self._session.add(SheetRowModel(sheet_id=sheet.id, row_number=1, cells=list(header)))
        await self._session.flush()
        logger.info("Created sheet '%s' with header row", sheet_name)
        return sheet
