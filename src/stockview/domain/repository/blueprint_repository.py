"""Abstract read repositories for product and token blueprint patches.

Defined in the domain layer so the domain never depends on
infrastructure.  Implementations raise RepositoryError when the
backing store cannot be read and return None for unknown ids.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockview.domain.model.blueprint import ProductBlueprintPatch, TokenBlueprintPatch


class ProductBlueprintRepository(ABC):

    @abstractmethod
    def list_ids_by_tenant(self, tenant_id: str) -> list[str]:
        """Return the ids of every product line owned by a tenant."""

    @abstractmethod
    def get_patch(self, product_line_id: str) -> ProductBlueprintPatch | None:
        """Return the patch of a product line, or None if not found."""


class TokenBlueprintRepository(ABC):

    @abstractmethod
    def get_patch(self, token_line_id: str) -> TokenBlueprintPatch | None:
        """Return the patch of a token line, or None if not found."""
