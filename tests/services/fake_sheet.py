"""Fake Sheet Book — in-memory SheetBook/Sheet for store adapter tests.

Invariants:
    - Rows are stored as {row_number: [cells...]}, header included as row 1
    - last_row() mirrors a spreadsheet: the last row with any non-empty cell
    - Every write is recorded in `writes` so tests can assert "nothing written"

Design Decisions:
    - Flat classes (no inheritance from the Protocols): structural typing is enough
"""

from registry_api.core.registry_rows import SheetRow

HEADER = [
    "Product Name", "Manufacturer", "Price", "Product URL",
    "Image URL", "Claimed", "Claimed By", "Claimed At",
]


class FakeSheet:
    def __init__(self, name: str, rows: list[list] | None = None):
        self.name = name
        self.rows: dict[int, list] = {
            i + 1: list(cells) for i, cells in enumerate(rows or [])
        }
        self.writes: list[tuple[int, dict]] = []

    async def read_rows(self) -> list[SheetRow]:
        return [
            SheetRow(row_number=n, cells=tuple(cells))
            for n, cells in sorted(self.rows.items())
        ]

    async def last_row(self) -> int:
        occupied = [
            n for n, cells in self.rows.items()
            if any(c not in (None, "") for c in cells)
        ]
        return max(occupied, default=0)

    async def read_cell(self, row, column):
        cells = self.rows.get(row, [])
        index = column - 1
        return cells[index] if index < len(cells) else None

    async def write_cells(self, row, values) -> None:
        cells = self.rows.setdefault(row, [])
        for column, value in values.items():
            while len(cells) < column:
                cells.append(None)
            cells[column - 1] = value
        self.writes.append((row, dict(values)))

    def cell(self, row: int, column: int):
        cells = self.rows.get(row, [])
        return cells[column - 1] if column - 1 < len(cells) else None


class FakeSheetBook:
    def __init__(self, *sheets: FakeSheet):
        self.sheets = {s.name: s for s in sheets}

    async def get_sheet(self, name: str):
        return self.sheets.get(name)


def make_book(rows: list[list], name: str = "REGISTRY") -> tuple[FakeSheetBook, FakeSheet]:
    """Book with one sheet whose first row is the standard header."""
    sheet = FakeSheet(name, [HEADER, *rows])
    return FakeSheetBook(sheet), sheet
