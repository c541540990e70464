"""Inventory records: the per-model stock ledger for one product/token pairing.

Each inventory belongs to exactly one product line and one token line and
holds a ledger entry per model variant.  Writers outside this package keep
the ledger up to date; here it is only ever read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

INVENTORY_ID_SEPARATOR = "__"


@dataclass(frozen=True)
class StockLedgerEntry:
    """Stock counters for a single model variant.

    ``reserved_count`` is a denormalized counter and ``reserved_by_order``
    the per-order ledger.  They are maintained by different writers and
    are not guaranteed to agree.
    """

    accumulation: int = 0
    reserved_count: int = 0
    reserved_by_order: dict[str, int] = field(default_factory=dict)
    # legacy itemized product ids, superseded by ``accumulation``
    products: tuple[str, ...] = ()


@dataclass(frozen=True)
class Inventory:
    id: str
    product_line_id: str
    token_line_id: str
    model_ids: frozenset[str] = frozenset()
    stock: dict[str, StockLedgerEntry] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def last_updated(self) -> datetime | None:
        return self.updated_at or self.created_at


def build_inventory_id(product_line_id: str, token_line_id: str) -> str:
    """Derive an inventory id from its product-line/token-line pair."""
    return f"{product_line_id.strip()}{INVENTORY_ID_SEPARATOR}{token_line_id.strip()}"


def parse_inventory_id(inventory_id: str) -> tuple[str, str] | None:
    """Split an inventory id back into ``(product_line_id, token_line_id)``.

    Returns None when the id does not follow the ``{pl}__{tl}`` convention.
    """
    parts = inventory_id.strip().split(INVENTORY_ID_SEPARATOR, 1)
    if len(parts) != 2:
        return None
    product_line_id, token_line_id = parts[0].strip(), parts[1].strip()
    if not product_line_id or not token_line_id:
        return None
    return product_line_id, token_line_id
