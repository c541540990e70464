"""Abstract read repository for Inventory records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockview.domain.model.inventory import Inventory


class InventoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, inventory_id: str) -> Inventory | None:
        """Return an inventory by its id, or None if not found."""

    @abstractmethod
    def list_by_product_line(self, product_line_id: str) -> list[Inventory]:
        """Return every inventory stocked for a product line."""
