"""Application service: List Inventory IDs use case (query)."""

from __future__ import annotations

from stockview.domain.exceptions import ConfigurationError, ValidationError
from stockview.domain.repository.inventory_repository import InventoryRepository


class ListInventoryIdsHandler:

    def __init__(self, inventory_repo: InventoryRepository | None) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, product_line_id: str, token_line_id: str) -> list[str]:
        """Return the sorted ids of a product line's inventories for one token line."""
        if self._inventory_repo is None:
            raise ConfigurationError("inventory repository is not configured")

        product_line_id = product_line_id.strip()
        token_line_id = token_line_id.strip()
        if not product_line_id or not token_line_id:
            raise ValidationError("product line id and token line id are required")

        ids = {
            inventory.id.strip()
            for inventory in self._inventory_repo.list_by_product_line(product_line_id)
            if inventory.id.strip() and inventory.token_line_id.strip() == token_line_id
        }
        return sorted(ids)
