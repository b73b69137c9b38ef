"""Claim state tests — pure tests for claimed-flag normalization and claim decisions.

Tests cover:
    is_claimed: accepted markers, case/whitespace, falsy and unknown values
    check_row_index: header, below header, past last row, missing index
    decide_claim: rejection vs success outcomes
"""

import pytest

from registry_api.core.claim_state import (
    ALREADY_CLAIMED_MESSAGE,
    CLAIMED_MESSAGE,
    ClaimOutcome,
    check_row_index,
    decide_claim,
    is_claimed,
)
from registry_api.core.errors import InvalidRowIndexError


# --- is_claimed --------------------------------------------------------------

@pytest.mark.parametrize("raw", ["TRUE", "True", "yes", "Claimed", "x", "X"])
def test_claimed_markers_normalize_to_true(raw):
    assert is_claimed(raw) is True


@pytest.mark.parametrize("raw", ["", None, "no", "false", "maybe"])
def test_other_values_normalize_to_false(raw):
    assert is_claimed(raw) is False


def test_surrounding_whitespace_is_ignored():
    assert is_claimed("  yes \n") is True


def test_native_boolean_cells():
    assert is_claimed(True) is True
    assert is_claimed(False) is False


def test_numbers_are_not_claimed():
    assert is_claimed(0) is False
    assert is_claimed(1) is False


def test_marker_must_match_exactly():
    assert is_claimed("yes please") is False
    assert is_claimed("xx") is False


# --- check_row_index ---------------------------------------------------------

def test_first_data_row_is_valid():
    assert check_row_index(2, 5) == 2


def test_last_row_is_valid():
    assert check_row_index(5, 5) == 5


@pytest.mark.parametrize("row_index", [1, 0, -3])
def test_header_and_below_are_invalid(row_index):
    with pytest.raises(InvalidRowIndexError) as exc_info:
        check_row_index(row_index, 5)
    assert exc_info.value.message == "Invalid row index"
    assert exc_info.value.http_status == 400


def test_past_last_row_is_invalid():
    with pytest.raises(InvalidRowIndexError):
        check_row_index(6, 5)


def test_missing_row_index_is_invalid():
    with pytest.raises(InvalidRowIndexError):
        check_row_index(None, 5)


def test_header_only_sheet_has_no_valid_rows():
    with pytest.raises(InvalidRowIndexError):
        check_row_index(2, 1)


# --- decide_claim ------------------------------------------------------------

def test_claimed_cell_is_rejected():
    outcome = decide_claim("TRUE")
    assert outcome == ClaimOutcome(success=False, message=ALREADY_CLAIMED_MESSAGE)


def test_empty_cell_can_be_claimed():
    outcome = decide_claim(None)
    assert outcome == ClaimOutcome(success=True, message=CLAIMED_MESSAGE)


def test_outcome_serializes_to_wire_shape():
    assert decide_claim("x").to_response() == {
        "success": False, "message": "Item already claimed",
    }
    assert decide_claim("no").to_response() == {
        "success": True, "message": "Item claimed successfully",
    }
