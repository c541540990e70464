"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry read models out to the CLI or HTTP handlers, which serialize
them as-is.  This is where unresolved display attributes turn into the
``"-"`` placeholder; the domain keeps them as None.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockview.domain.model.blueprint import ProductBlueprintPatch, TokenBlueprintPatch

PLACEHOLDER = "-"


def display(value: str | None) -> str:
    """Return the trimmed value, or the placeholder if it is empty."""
    if value is None:
        return PLACEHOLDER
    value = value.strip()
    return value or PLACEHOLDER


@dataclass(frozen=True)
class RequestContext:
    """Input: caller identity scoped to one request."""

    tenant_id: str | None = None


@dataclass(frozen=True)
class ManagementRowDTO:
    """Output: one company-wide row per product line, token line and model number."""

    product_line_id: str
    product_name: str
    token_line_id: str
    token_name: str
    model_number: str
    available_stock: int
    reserved_count: int


@dataclass(frozen=True)
class DetailRowDTO:
    """Output: one model of a single inventory."""

    model_id: str
    model_number: str
    size: str
    color: str
    rgb: int | None
    stock: int  # available stock


@dataclass(frozen=True)
class InventoryDetailDTO:
    inventory_id: str
    product_line_id: str
    token_line_id: str
    product_blueprint_patch: ProductBlueprintPatch | None
    token_blueprint_patch: TokenBlueprintPatch | None
    rows: list[DetailRowDTO]
    total_stock: int
    updated_at: str  # RFC3339 UTC, "" when unknown


@dataclass(frozen=True)
class PriceRowDTO:
    """Output: one model awaiting a price in the pre-listing flow."""

    model_id: str
    size: str
    color: str
    rgb: int | None
    stock: int
    price: int | None = None


@dataclass(frozen=True)
class ListCreateDTO:
    """Output: everything needed to price a (possibly new) inventory."""

    inventory_id: str
    product_line_id: str
    token_line_id: str
    product_name: str
    product_brand_name: str
    token_name: str
    token_brand_name: str
    price_rows: list[PriceRowDTO]
    total_stock: int
    list_image_url: str = ""
