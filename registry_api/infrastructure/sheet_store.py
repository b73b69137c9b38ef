"""SQL Sheet Store — SheetBook/Sheet Protocol implementation over async SQLAlchemy.

Invariants:
    - One SqlSheetBook per request, bound to that request's AsyncSession
    - Cells are stored as text; datetimes are written as ISO-8601
    - last_row() is the last row holding at least one non-empty cell
    - read_cell() locks the row (SELECT ... FOR UPDATE) until the claim commits
    - write_cells() commits: a claim is one unit of work

Design Decisions:
    - FOR UPDATE gives row-level exclusivity on PostgreSQL; SQLite ignores it and
      the claim sequence degrades to best effort (ADR: no application-level lock)
    - Rows missing below last_row are created on write, matching a spreadsheet
      where every row up to the last one exists
"""

import logging
from datetime import datetime
from typing import Mapping

from fastapi import Depends
from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.domain_types import Column, RowNumber
from registry_api.core.registry_rows import SheetRow
from registry_api.infrastructure.database import get_db
from registry_api.models.sheet import CELL_ATTRIBUTES, Sheet, SheetRowModel

logger = logging.getLogger(__name__)


def _to_cell(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class SqlSheet:
    """One named sheet backed by the sheet_rows table."""

    def __init__(self, db: AsyncSession, sheet: Sheet):
        self.db = db
        self.name = sheet.name
        self._sheet_id = sheet.id

    async def read_rows(self) -> list[SheetRow]:
        result = await self.db.execute(
            select(SheetRowModel)
            .where(SheetRowModel.sheet_id == self._sheet_id)
            .order_by(SheetRowModel.row_number)
        )
        return [
            SheetRow(row_number=RowNumber(r.row_number), cells=r.cells())
            for r in result.scalars().all()
        ]

    async def last_row(self) -> int:
        occupied = or_(*(
            and_(
                getattr(SheetRowModel, attr).is_not(None),
                getattr(SheetRowModel, attr) != "",
            )
            for attr in CELL_ATTRIBUTES
        ))
        result = await self.db.execute(
            select(func.max(SheetRowModel.row_number))
            .where(SheetRowModel.sheet_id == self._sheet_id)
            .where(occupied)
        )
        return result.scalar_one_or_none() or 0

    async def read_cell(self, row: RowNumber, column: Column) -> object:
        model = await self._get_row(row, for_update=True)
        if model is None:
            return None
        return getattr(model, CELL_ATTRIBUTES[column - 1])

    async def write_cells(
        self, row: RowNumber, values: Mapping[Column, object],
    ) -> None:
        model = await self._get_row(row)
        if model is None:
            model = SheetRowModel(sheet_id=self._sheet_id, row_number=row)
            self.db.add(model)
        for column, value in values.items():
            setattr(model, CELL_ATTRIBUTES[column - 1], _to_cell(value))
        await self.db.commit()
        refs = ", ".join(f"{column.letter}{row}" for column in values)
        logger.debug(
            f"Wrote {self.name}!{refs}",
            extra={"sheet_name": self.name, "row_index": row},
        )

    async def _get_row(
        self, row: RowNumber, for_update: bool = False,
    ) -> SheetRowModel | None:
        query = (
            select(SheetRowModel)
            .where(SheetRowModel.sheet_id == self._sheet_id)
            .where(SheetRowModel.row_number == row)
        )
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()


class SqlSheetBook:
    """Spreadsheet handle: looks sheets up by name in the sheets table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_sheet(self, name: str) -> SqlSheet | None:
        result = await self.db.execute(select(Sheet).where(Sheet.name == name))
        sheet = result.scalar_one_or_none()
        if sheet is None:
            return None
        return SqlSheet(self.db, sheet)


async def get_sheet_book(db: AsyncSession = Depends(get_db)) -> SqlSheetBook:
    """FastAPI dependency for the request-scoped spreadsheet handle."""
    return SqlSheetBook(db)
