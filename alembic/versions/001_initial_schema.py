"""Initial schema — sheets and sheet_rows.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CELL_COLUMNS = ("col_a", "col_b", "col_c", "col_d", "col_e", "col_f", "col_g", "col_h")


def upgrade() -> None:
    op.create_table(
        "sheets",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "sheet_rows",
        sa.Column(
            "sheet_id", sa.Integer,
            sa.ForeignKey("sheets.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column("row_number", sa.Integer, primary_key=True),
        *(sa.Column(name, sa.Text, nullable=True) for name in CELL_COLUMNS),
    )


def downgrade() -> None:
    op.drop_table("sheet_rows")
    op.drop_table("sheets")
