"""Blueprint patches, the read-side views of product and token blueprints.

A patch is a snapshot of the fields other contexts need from a blueprint.
Only the product blueprint carries model references; their order drives
every per-model breakdown.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelRef:
    """A model variant referenced by a product blueprint.

    ``display_order`` of zero (or below) means the blueprint never ordered
    the model explicitly.
    """

    model_id: str
    display_order: int = 0


@dataclass(frozen=True)
class ProductBlueprintPatch:
    product_line_id: str
    product_name: str = ""
    brand_id: str = ""
    brand_name: str = ""
    company_id: str = ""
    model_refs: tuple[ModelRef, ...] = ()


@dataclass(frozen=True)
class TokenBlueprintPatch:
    token_line_id: str
    token_name: str = ""
    symbol: str = ""
    brand_id: str = ""
    brand_name: str = ""
    company_id: str = ""
