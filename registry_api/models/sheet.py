"""Sheet ORM — spreadsheet emulation: named sheets owning numbered rows of text cells.

Invariants:
    - Sheet.name is unique (the registry looks its sheet up by name)
    - (sheet_id, row_number) is the primary key of a row; row_number is 1-based
      and row 1 is the header
    - Cells are nullable text columns named after spreadsheet letters A..H
    - Rows may be sparse: a missing row_number is simply an empty row

Design Decisions:
    - Text cells over typed columns: the sheet is edited by humans, values like
      "$199.99" or "Yes" stay exactly as typed (ADR: free-form price column)
    - Composite PK over surrogate id: the row number IS the item identity
    - No ORM relationships: rows are always queried explicitly by sheet_id, and
      deleting a sheet relies on the ON DELETE CASCADE foreign key
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from registry_api.db.base import Base

CELL_ATTRIBUTES = (
    "col_a", "col_b", "col_c", "col_d", "col_e", "col_f", "col_g", "col_h",
)


class Sheet(Base):
    """A named table inside the spreadsheet."""
    __tablename__ = "sheets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class SheetRowModel(Base):
    """One physical row of a sheet."""
    __tablename__ = "sheet_rows"

    sheet_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("sheets.id", ondelete="CASCADE"), primary_key=True,
    )
    row_number: Mapped[int] = mapped_column(Integer, primary_key=True)

    col_a: Mapped[str | None] = mapped_column(Text, nullable=True)
    col_b: Mapped[str | None] = mapped_column(Text, nullable=True)
    col_c: Mapped[str | None] = mapped_column(Text, nullable=True)
    col_d: Mapped[str | None] = mapped_column(Text, nullable=True)
    col_e: Mapped[str | None] = mapped_column(Text, nullable=True)
    col_f: Mapped[str | None] = mapped_column(Text, nullable=True)
    col_g: Mapped[str | None] = mapped_column(Text, nullable=True)
    col_h: Mapped[str | None] = mapped_column(Text, nullable=True)

    def cells(self) -> tuple[str | None, ...]:
        return tuple(getattr(self, attr) for attr in CELL_ATTRIBUTES)
