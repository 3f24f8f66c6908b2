"""Logging endpoint — append one posted LogRecord as a sheet row."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from review_sentiment.adapters.persistence.database import get_session
from review_sentiment.application.use_cases.append_log_row import AppendLogRowUseCase
from review_sentiment.domain.entities.log_ack import LogAck
from review_sentiment.infrastructure.api.dependencies import get_append_log_row_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["logging"])


@router.post("/log")
async def append_log_row(
    request: Request,
    use_case: AppendLogRowUseCase = Depends(get_append_log_row_uc),
    session: AsyncSession = Depends(get_session),
):
    """Parse the JSON body and append it; failures come back as {success: false}."""
    body = await request.body()
    ack = await use_case.execute(body)

    if not ack.success:
        await session.rollback()
        return ack.to_dict()

    try:
        await session.commit()
    except Exception as e:
        logger.exception("Failed to commit log row")
        await session.rollback()
        ack = LogAck(success=False, error=str(e))

    return ack.to_dict()
