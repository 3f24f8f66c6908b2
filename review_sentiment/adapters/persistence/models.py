"""SQLAlchemy ORM models — a minimal spreadsheet: named sheets of JSON rows."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from review_sentiment.adapters.persistence.database import Base


class SheetModel(Base):
    __tablename__ = "sheets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    rows: Mapped[list["SheetRowModel"]] = relationship(
        back_populates="sheet", cascade="all, delete-orphan", order_by="SheetRowModel.row_number"
    )


class SheetRowModel(Base):
    __tablename__ = "sheet_rows"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sheet_id: Mapped[int] = mapped_column(Integer, ForeignKey("sheets.id"), nullable=False)
    # 1-based, row 1 is the header
    row_number: Mapped[int] = mapped_column(Integer, nullable=False)
    cells: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    sheet: Mapped["SheetModel"] = relationship(back_populates="rows")

    __table_args__ = (UniqueConstraint("sheet_id", "row_number", name="uq_sheet_rows_sheet_row"),)
