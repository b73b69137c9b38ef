"""Claim State — one-way unclaimed -> claimed transition rules.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - is_claimed() is the single normalization rule for both reads and claim checks
    - Rejection of an already-claimed row is a ClaimOutcome, never an exception
    - Row index validation raises InvalidRowIndexError (a protocol-level error)

Design Decisions:
    - ClaimOutcome as frozen dataclass: the router returns it verbatim, so it
      must be a plain value with no behavior beyond serialization
"""

from dataclasses import dataclass, asdict

from registry_api.core.domain_types import (
    CLAIMED_MARKERS, FIRST_DATA_ROW, RowNumber,
)
from registry_api.core.errors import InvalidRowIndexError

ALREADY_CLAIMED_MESSAGE = "Item already claimed"
CLAIMED_MESSAGE = "Item claimed successfully"


@dataclass(frozen=True)
class ClaimOutcome:
    """Result of a claim attempt that reached the sheet."""
    success: bool
    message: str

    def to_response(self) -> dict:
        return asdict(self)


CLAIM_SUCCEEDED = ClaimOutcome(success=True, message=CLAIMED_MESSAGE)
CLAIM_REJECTED = ClaimOutcome(success=False, message=ALREADY_CLAIMED_MESSAGE)


def is_claimed(value: object) -> bool:
    """Normalize a raw claimed-flag cell.

    Empty/falsy values are unclaimed. Otherwise the lowercased, trimmed text
    must be one of true/yes/claimed/x.
    """
    if not value:
        return False
    return str(value).lower().strip() in CLAIMED_MARKERS


def check_row_index(row_index: int | None, last_row: int) -> RowNumber:
    """Validate a claim target: data rows only, up to the last occupied row."""
    if row_index is None or row_index < FIRST_DATA_ROW or row_index > last_row:
        raise InvalidRowIndexError(row_index, last_row)
    return RowNumber(row_index)


def decide_claim(current_value: object) -> ClaimOutcome:
    """Outcome for a row whose claimed cell currently holds current_value."""
    if is_claimed(current_value):
        return CLAIM_REJECTED
    return CLAIM_SUCCEEDED
