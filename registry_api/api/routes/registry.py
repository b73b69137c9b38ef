"""Registry Routes — the read (list) and write (claim) entry points.

Invariants:
    - GET returns {"items": [...]}; every failure becomes {"error": <message>}
    - POST accepts only action == "claim"; anything else is 400 "Invalid action"
    - A claim outcome (success or "Item already claimed") is returned verbatim with 200
    - Routes never contain business logic (delegate to services/registry_store)

Design Decisions:
    - Errors are raised, not returned: the global handlers in api/error_handlers.py
      are the single catch boundary (ADR: uniform error shape)
    - Sheet name read from settings per request: tests can override get_settings
"""

import logging

from fastapi import APIRouter, Depends

from registry_api.config import Settings, get_settings
from registry_api.core.domain_types import CLAIM_ACTION
from registry_api.core.errors import InvalidActionError
from registry_api.core.repository_protocols import SheetBook
from registry_api.infrastructure.sheet_store import get_sheet_book
from registry_api.schemas.registry import (
    ClaimRequest, ClaimResponse, ErrorResponse,
    ItemListResponse, RegistryItemResponse,
)
from registry_api.services.registry_store import claim_item, list_items

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/registry",
    tags=["registry"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", response_model=ItemListResponse)
async def get_registry(
    book: SheetBook = Depends(get_sheet_book),
    settings: Settings = Depends(get_settings),
):
    """List all registry items."""
    items = await list_items(book, settings.sheet_name)
    return ItemListResponse(
        items=[RegistryItemResponse.from_item(item) for item in items],
    )


@router.post("", response_model=ClaimResponse)
async def post_registry(
    body: ClaimRequest,
    book: SheetBook = Depends(get_sheet_book),
    settings: Settings = Depends(get_settings),
):
    """Claim a registry item."""
    if body.action != CLAIM_ACTION:
        raise InvalidActionError(body.action)
    outcome = await claim_item(
        book, settings.sheet_name, body.row_index, body.claimed_by,
    )
    return ClaimResponse(**outcome.to_response())
