"""Registry Schemas — Pydantic models for the two registry entry points.

Invariants:
    - Wire names are camelCase (productName, rowIndex, claimedBy); Python names snake_case
    - ClaimRequest.action is NOT constrained here: an unknown action must become
      the router's "Invalid action" error, not a validation error
    - ClaimRequest.row_index is optional here: action is checked before the row index
    - claimedBy is stripped; blank becomes None (leaves the claimant cell untouched)

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for every field
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from registry_api.core.registry_rows import RegistryItem


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClaimRequest(_CamelModel):
    """Write entry point body: {"action": "claim", "rowIndex": 2, "claimedBy": "Alex"}."""
    action: str | None = None
    row_index: int | None = None
    claimed_by: str | None = None

    @field_validator("claimed_by")
    @classmethod
    def blank_claimant_is_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class RegistryItemResponse(_CamelModel):
    """One registry item as published to the website."""
    id: int
    product_name: str
    manufacturer: str = ""
    price: str = ""
    product_url: str = ""
    image_url: str = ""
    claimed: bool = False
    claimed_by: str = ""

    @classmethod
    def from_item(cls, item: RegistryItem) -> "RegistryItemResponse":
        return cls(
            id=item.id,
            product_name=item.product_name,
            manufacturer=item.manufacturer,
            price=item.price,
            product_url=item.product_url,
            image_url=item.image_url,
            claimed=item.claimed,
            claimed_by=item.claimed_by,
        )


class ItemListResponse(BaseModel):
    """Read entry point response."""
    items: list[RegistryItemResponse]


class ClaimResponse(BaseModel):
    """Write entry point response (success or business rejection)."""
    success: bool
    message: str


class ErrorResponse(BaseModel):
    """Protocol-level failure envelope."""
    error: str
