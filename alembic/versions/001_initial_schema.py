"""Initial schema — sheets and sheet rows for the logging endpoint.

Revision ID: 001
Revises: None
Create Date: 2026-10-16
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "sheets",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), unique=True, nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "sheet_rows",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("sheet_id", sa.Integer, sa.ForeignKey("sheets.id"), nullable=False),
        sa.Column("row_number", sa.Integer, nullable=False),
        sa.Column("cells", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("sheet_id", "row_number", name="uq_sheet_rows_sheet_row"),
    )


def downgrade() -> None:
    op.drop_table("sheet_rows")
    op.drop_table("sheets")
