"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The backing sheet is reached only through these Protocols
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: implementations do IO; the pure functions that consume
      what they return (core/registry_rows, core/claim_state) are never async
"""

from typing import Mapping, Protocol

from registry_api.core.domain_types import Column, RowNumber
from registry_api.core.registry_rows import SheetRow


class Sheet(Protocol):
    """Contract for one named backing table — implemented by shell."""
    name: str

    async def read_rows(self) -> list[SheetRow]: ...
    async def last_row(self) -> int: ...
    async def read_cell(self, row: RowNumber, column: Column) -> object: ...
    async def write_cells(
        self, row: RowNumber, values: Mapping[Column, object],
    ) -> None: ...


class SheetBook(Protocol):
    """Contract for the spreadsheet holding named sheets — implemented by shell."""
    async def get_sheet(self, name: str) -> Sheet | None: ...
