"""Name resolution port.

Display names live in other bounded contexts (brands, blueprints,
models).  Every lookup is best-effort: an unknown id yields an empty
string or an empty ModelAttributes, never an exception.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockview.domain.model.value_objects import ModelAttributes


class NameResolver(ABC):

    @abstractmethod
    def resolve_product_name(self, product_line_id: str) -> str:
        """Return the product name, or "" if unknown."""

    @abstractmethod
    def resolve_token_name(self, token_line_id: str) -> str:
        """Return the token name, or "" if unknown."""

    @abstractmethod
    def resolve_brand_name(self, brand_id: str) -> str:
        """Return the brand name, or "" if unknown."""

    @abstractmethod
    def resolve_model_attributes(self, model_id: str) -> ModelAttributes:
        """Return model number, size, color and rgb; unknown fields are None."""
