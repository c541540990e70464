"""Domain service: Model Population.

The canonical population of a product line is the ordered, de-duplicated
list of model ids its blueprint references.  Every per-model breakdown is
driven by it so that models without stock still show up.

Callers decide what an empty population means; this service never falls
back to ledger keys on its own.
"""

from __future__ import annotations

import structlog

from stockview.domain.exceptions import RepositoryError
from stockview.domain.model.blueprint import ModelRef, ProductBlueprintPatch
from stockview.domain.repository.blueprint_repository import ProductBlueprintRepository

logger = structlog.get_logger(__name__)


def _sort_key(ref: ModelRef) -> tuple[int, int, str]:
    # unordered refs (display_order <= 0) go after every ordered one
    if ref.display_order > 0:
        return (0, ref.display_order, ref.model_id)
    return (1, 0, ref.model_id)


def order_model_refs(refs: list[ModelRef] | tuple[ModelRef, ...]) -> list[str]:
    """Sort refs by display order then model id, dropping blanks and duplicates."""
    cleaned = [
        ModelRef(model_id=ref.model_id.strip(), display_order=ref.display_order)
        for ref in refs
        if ref.model_id.strip()
    ]
    seen: set[str] = set()
    ordered: list[str] = []
    for ref in sorted(cleaned, key=_sort_key):
        if ref.model_id in seen:
            continue
        seen.add(ref.model_id)
        ordered.append(ref.model_id)
    return ordered


class ModelPopulationResolver:

    def __init__(self, product_blueprint_repo: ProductBlueprintRepository) -> None:
        self._product_blueprint_repo = product_blueprint_repo

    def resolve(self, product_line_id: str) -> list[str]:
        """Return the canonical model ids of a product line, or [] if unknown."""
        try:
            patch = self._product_blueprint_repo.get_patch(product_line_id)
        except RepositoryError as exc:
            logger.warning(
                "product_blueprint_unavailable",
                product_line_id=product_line_id,
                error=str(exc),
            )
            return []
        return self.from_patch(product_line_id, patch)

    def from_patch(
        self, product_line_id: str, patch: ProductBlueprintPatch | None
    ) -> list[str]:
        """Canonical model ids of a patch the caller already fetched."""
        if patch is None or not patch.model_refs:
            logger.debug("model_population_empty", product_line_id=product_line_id)
            return []
        return order_model_refs(patch.model_refs)
