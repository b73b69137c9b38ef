"""Registry Rows — typed sheet rows and their projection into registry items.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Header row (row 1) is never projected
    - A row whose product name is empty or whitespace-only is skipped
    - RegistryItem.id is the literal sheet row number, never a list position
    - Missing text cells default to ""

Design Decisions:
    - SheetRow is the boundary record: storage implementations convert their raw
      cells once, core never sees driver-specific row objects
    - Cells are kept as raw values (str, bool, number, None) so the claimed-flag
      normalization sees exactly what the sheet holds
"""

from dataclasses import dataclass, field

from registry_api.core.claim_state import is_claimed
from registry_api.core.domain_types import Column, HEADER_ROW, RowNumber


@dataclass(frozen=True)
class SheetRow:
    """One physical sheet row: its 1-based number and its cells from column A."""
    row_number: RowNumber
    cells: tuple[object, ...] = field(default_factory=tuple)

    def cell(self, column: Column) -> object:
        index = column - 1
        if index >= len(self.cells):
            return None
        return self.cells[index]

    def text(self, column: Column) -> str:
        value = self.cell(column)
        return str(value) if value else ""

    @property
    def is_blank(self) -> bool:
        return not self.text(Column.PRODUCT_NAME).strip()


@dataclass(frozen=True)
class RegistryItem:
    """Public view of a registry row."""
    id: int
    product_name: str
    manufacturer: str = ""
    price: str = ""
    product_url: str = ""
    image_url: str = ""
    claimed: bool = False
    claimed_by: str = ""


def row_to_item(row: SheetRow) -> RegistryItem | None:
    """Project one data row; None for the header or a blank row."""
    if row.row_number <= HEADER_ROW or row.is_blank:
        return None
    return RegistryItem(
        id=row.row_number,
        product_name=row.text(Column.PRODUCT_NAME),
        manufacturer=row.text(Column.MANUFACTURER),
        price=row.text(Column.PRICE),
        product_url=row.text(Column.PRODUCT_URL),
        image_url=row.text(Column.IMAGE_URL),
        claimed=is_claimed(row.cell(Column.CLAIMED)),
        claimed_by=row.text(Column.CLAIMED_BY),
    )


def project_items(rows: list[SheetRow]) -> list[RegistryItem]:
    """Project stored rows into items, in row order; the sheet may be sparse."""
    items = []
    for row in sorted(rows, key=lambda r: r.row_number):
        item = row_to_item(row)
        if item is not None:
            items.append(item)
    return items
