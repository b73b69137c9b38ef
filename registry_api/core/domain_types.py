"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RowNumber is 1-based and counts the header as row 1
    - Column values are 1-based spreadsheet column positions (A=1 ... H=8)
    - CLAIMED_MARKERS are lowercase; comparisons normalize before lookup

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - IntEnum for columns: usable directly as positions and as dict keys
"""

from enum import IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RowNumber = NewType("RowNumber", int)


# ─── Enums ───────────────────────────────────────────────────────

class Column(IntEnum):
    """Fixed sheet layout, 1-indexed like the spreadsheet UI."""
    PRODUCT_NAME = 1    # A
    MANUFACTURER = 2    # B
    PRICE = 3           # C
    PRODUCT_URL = 4     # D
    IMAGE_URL = 5       # E
    CLAIMED = 6         # F
    CLAIMED_BY = 7      # G
    CLAIMED_AT = 8      # H (write-only)

    @property
    def letter(self) -> str:
        return chr(ord("A") + self.value - 1)


# ─── Constants ───────────────────────────────────────────────────

HEADER_ROW = RowNumber(1)
FIRST_DATA_ROW = RowNumber(2)

CLAIMED_MARKERS = frozenset({"true", "yes", "claimed", "x"})
CANONICAL_CLAIMED_VALUE = "TRUE"

CLAIM_ACTION = "claim"
