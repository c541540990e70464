"""Application service: Show Inventory Detail use case (query).

Builds the per-model breakdown of one inventory.  Rows follow the
product line's canonical model population, so a model that was never
stocked still appears with zero.  When the blueprint references no
models at all, the ledger's own model ids are listed instead.
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from stockview.application.blueprint_enrichment import BlueprintPatchEnricher
from stockview.application.dto import DetailRowDTO, InventoryDetailDTO, display
from stockview.domain.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InvalidInventoryError,
    ValidationError,
)
from stockview.domain.model.inventory import Inventory
from stockview.domain.model.value_objects import ModelAttributes
from stockview.domain.repository.blueprint_repository import (
    ProductBlueprintRepository,
    TokenBlueprintRepository,
)
from stockview.domain.repository.inventory_repository import InventoryRepository
from stockview.domain.service.availability import compute_availability
from stockview.domain.service.model_population import ModelPopulationResolver
from stockview.domain.service.name_resolver import NameResolver

logger = structlog.get_logger(__name__)


class ShowInventoryDetailHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository | None,
        product_blueprint_repo: ProductBlueprintRepository | None = None,
        token_blueprint_repo: TokenBlueprintRepository | None = None,
        name_resolver: NameResolver | None = None,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._population = (
            ModelPopulationResolver(product_blueprint_repo)
            if product_blueprint_repo is not None
            else None
        )
        self._enricher = BlueprintPatchEnricher(
            product_blueprint_repo=product_blueprint_repo,
            token_blueprint_repo=token_blueprint_repo,
            name_resolver=name_resolver,
        )
        self._name_resolver = name_resolver

    def handle(self, inventory_id: str) -> InventoryDetailDTO:
        if self._inventory_repo is None:
            raise ConfigurationError("inventory repository is not configured")

        inventory_id = inventory_id.strip()
        if not inventory_id:
            raise ValidationError("inventory id is required")

        inventory = self._inventory_repo.get_by_id(inventory_id)
        if inventory is None:
            raise EntityNotFoundError(f"Inventory '{inventory_id}' not found")

        product_line_id = inventory.product_line_id.strip()
        token_line_id = inventory.token_line_id.strip()
        if not product_line_id:
            raise InvalidInventoryError(
                f"Inventory '{inventory_id}' has no product line id"
            )
        if not token_line_id:
            raise InvalidInventoryError(
                f"Inventory '{inventory_id}' has no token line id"
            )

        rows = [
            self._build_row(inventory, model_id)
            for model_id in self._model_ids(inventory, product_line_id)
        ]

        return InventoryDetailDTO(
            inventory_id=inventory_id,
            product_line_id=product_line_id,
            token_line_id=token_line_id,
            product_blueprint_patch=self._enricher.product_patch(product_line_id),
            token_blueprint_patch=self._enricher.token_patch(token_line_id),
            rows=rows,
            total_stock=sum(row.stock for row in rows),
            updated_at=_format_timestamp(inventory.last_updated),
        )

    # --- Internal helpers -----------------------------------------------------

    def _model_ids(self, inventory: Inventory, product_line_id: str) -> list[str]:
        population = (
            self._population.resolve(product_line_id) if self._population else []
        )
        if population:
            return population

        ledger_ids = sorted({mid.strip() for mid in inventory.stock if mid.strip()})
        logger.info(
            "model_population_fallback_to_ledger",
            inventory_id=inventory.id,
            product_line_id=product_line_id,
            models=len(ledger_ids),
        )
        return ledger_ids

    def _build_row(self, inventory: Inventory, model_id: str) -> DetailRowDTO:
        entry = inventory.stock.get(model_id)
        stock = compute_availability(entry, model_id).available if entry else 0

        attrs = self._resolve_attributes(model_id)
        missing = attrs.missing()
        if missing:
            logger.warning(
                "model_attributes_missing",
                inventory_id=inventory.id,
                model_id=model_id,
                missing=missing,
            )

        return DetailRowDTO(
            model_id=model_id,
            model_number=display(attrs.model_number),
            size=display(attrs.size),
            color=display(attrs.color),
            rgb=attrs.rgb,
            stock=stock,
        )

    def _resolve_attributes(self, model_id: str) -> ModelAttributes:
        if self._name_resolver is None:
            return ModelAttributes()
        return self._name_resolver.resolve_model_attributes(model_id)


def _format_timestamp(value: datetime | None) -> str:
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
