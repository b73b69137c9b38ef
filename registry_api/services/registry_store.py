"""Registry Store Adapter — list registry items and claim one, against an injected SheetBook.

Invariants:
    - Missing sheet raises SheetNotFoundError; bad row index raises InvalidRowIndexError
    - An already-claimed row returns CLAIM_REJECTED and writes nothing
    - A successful claim writes F="TRUE", G=claimed_by (only when non-empty), H=now
    - The claimed cell is re-read inside the claim, never trusted from a previous list

Design Decisions:
    - Plain async functions over a class: the adapter has no state beyond its
      arguments (ADR: impureim sandwich — read, decide in core, write)
    - clock injectable so tests can pin the claim timestamp
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from registry_api.core.claim_state import (
    ClaimOutcome, check_row_index, decide_claim,
)
from registry_api.core.domain_types import CANONICAL_CLAIMED_VALUE, Column
from registry_api.core.errors import SheetNotFoundError
from registry_api.core.registry_rows import RegistryItem, project_items
from registry_api.core.repository_protocols import Sheet, SheetBook

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def _open_sheet(book: SheetBook, sheet_name: str) -> Sheet:
    sheet = await book.get_sheet(sheet_name)
    if sheet is None:
        raise SheetNotFoundError(sheet_name)
    return sheet


async def list_items(book: SheetBook, sheet_name: str) -> list[RegistryItem]:
    """Return every non-blank data row of the sheet as a RegistryItem."""
    sheet = await _open_sheet(book, sheet_name)
    rows = await sheet.read_rows()
    items = project_items(rows)
    logger.debug(
        f"Listed {len(items)} item(s) from {sheet_name}",
        extra={"sheet_name": sheet_name, "item_count": len(items)},
    )
    return items


async def claim_item(
    book: SheetBook,
    sheet_name: str,
    row_index: int | None,
    claimed_by: str | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> ClaimOutcome:
    """Mark the row at row_index as claimed, once."""
    sheet = await _open_sheet(book, sheet_name)
    row = check_row_index(row_index, await sheet.last_row())

    outcome = decide_claim(await sheet.read_cell(row, Column.CLAIMED))
    if not outcome.success:
        logger.info(
            f"Claim rejected: row {row} already claimed",
            extra={"sheet_name": sheet_name, "row_index": row},
        )
        return outcome

    updates: dict[Column, object] = {Column.CLAIMED: CANONICAL_CLAIMED_VALUE}
    if claimed_by:
        updates[Column.CLAIMED_BY] = claimed_by
    updates[Column.CLAIMED_AT] = clock()
    await sheet.write_cells(row, updates)

    logger.info(
        f"Row {row} claimed",
        extra={"sheet_name": sheet_name, "row_index": row},
    )
    return outcome
