"""Application service: Build Price Rows use case (query).

Assembles what a seller needs to enter prices for an inventory before it
is listed.  The inventory may not exist yet, so "no stock assigned" is a
normal outcome: every model of the canonical population gets a row, with
its available stock when a matching inventory is found and zero
otherwise.

Unlike the inventory detail view, an empty canonical population is NOT
replaced by the ledger's model ids; the payload simply has no rows.
"""

from __future__ import annotations

import structlog

from stockview.application.blueprint_enrichment import BlueprintPatchEnricher
from stockview.application.dto import ListCreateDTO, PriceRowDTO, display
from stockview.domain.exceptions import ConfigurationError, ValidationError
from stockview.domain.model.inventory import (
    Inventory,
    build_inventory_id,
    parse_inventory_id,
)
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


class BuildPriceRowsHandler:

    def __init__(
        self,
        product_blueprint_repo: ProductBlueprintRepository | None,
        inventory_repo: InventoryRepository | None = None,
        token_blueprint_repo: TokenBlueprintRepository | None = None,
        name_resolver: NameResolver | None = None,
    ) -> None:
        self._product_blueprint_repo = product_blueprint_repo
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

    def handle_by_inventory_id(
        self, inventory_id: str, list_image_url: str = ""
    ) -> ListCreateDTO:
        """Build the payload for an inventory id, existing or synthesized."""
        inventory_id = inventory_id.strip()
        if not inventory_id:
            raise ValidationError("inventory id is required")

        pair = self._pair_from_record(inventory_id) or parse_inventory_id(inventory_id)
        if pair is None:
            raise ValidationError(
                f"Invalid inventory id '{inventory_id}' "
                "(expected '{productLineId}__{tokenLineId}')"
            )
        product_line_id, token_line_id = pair
        return self._build(product_line_id, token_line_id, inventory_id, list_image_url)

    def handle_by_ids(
        self, product_line_id: str, token_line_id: str, list_image_url: str = ""
    ) -> ListCreateDTO:
        """Build the payload for an explicit product-line/token-line pair."""
        product_line_id = product_line_id.strip()
        token_line_id = token_line_id.strip()
        if not product_line_id or not token_line_id:
            raise ValidationError("product line id and token line id are required")

        inventory_id = build_inventory_id(product_line_id, token_line_id)
        return self._build(product_line_id, token_line_id, inventory_id, list_image_url)

    # --- Assembly -------------------------------------------------------------

    def _build(
        self,
        product_line_id: str,
        token_line_id: str,
        inventory_id: str,
        list_image_url: str,
    ) -> ListCreateDTO:
        if self._product_blueprint_repo is None:
            raise ConfigurationError("product blueprint repository is not configured")

        product_patch = self._enricher.product_patch(product_line_id)
        token_patch = self._enricher.token_patch(token_line_id)

        inventory = self._locate_inventory(product_line_id, token_line_id, inventory_id)
        population = self._population.from_patch(product_line_id, product_patch)
        rows = self._build_rows(product_line_id, population, inventory)

        return ListCreateDTO(
            inventory_id=inventory_id,
            product_line_id=product_line_id,
            token_line_id=token_line_id,
            product_name=self._product_name(product_line_id),
            product_brand_name=product_patch.brand_name if product_patch else "",
            token_name=self._token_name(token_line_id),
            token_brand_name=token_patch.brand_name if token_patch else "",
            price_rows=rows,
            total_stock=sum(row.stock for row in rows),
            list_image_url=list_image_url.strip(),
        )

    def _build_rows(
        self,
        product_line_id: str,
        population: list[str],
        inventory: Inventory | None,
    ) -> list[PriceRowDTO]:
        if not population:
            logger.info("price_rows_empty_population", product_line_id=product_line_id)
            return []

        rows: list[PriceRowDTO] = []
        for model_id in population:
            stock = 0
            entry = inventory.stock.get(model_id) if inventory is not None else None
            if entry is not None:
                stock = compute_availability(entry, model_id).available

            attrs = self._resolve_attributes(model_id)
            rows.append(
                PriceRowDTO(
                    model_id=model_id,
                    size=display(attrs.size),
                    color=display(attrs.color),
                    rgb=attrs.rgb,
                    stock=stock,
                )
            )

        rows.sort(key=lambda row: (row.size, row.color, row.model_id))
        return rows

    # --- Lookups --------------------------------------------------------------

    def _pair_from_record(self, inventory_id: str) -> tuple[str, str] | None:
        if self._inventory_repo is None:
            return None
        inventory = self._inventory_repo.get_by_id(inventory_id)
        if inventory is None:
            return None
        product_line_id = inventory.product_line_id.strip()
        token_line_id = inventory.token_line_id.strip()
        if not product_line_id or not token_line_id:
            return None
        return product_line_id, token_line_id

    def _locate_inventory(
        self, product_line_id: str, token_line_id: str, inventory_id: str
    ) -> Inventory | None:
        """Find the inventory by id, else the first one of the same token line."""
        if self._inventory_repo is None:
            return None

        inventories = self._inventory_repo.list_by_product_line(product_line_id)
        for inventory in inventories:
            if inventory.id.strip() == inventory_id:
                return inventory
        for inventory in inventories:
            if inventory.token_line_id.strip() == token_line_id:
                return inventory

        logger.debug(
            "price_rows_no_inventory",
            product_line_id=product_line_id,
            token_line_id=token_line_id,
        )
        return None

    def _product_name(self, product_line_id: str) -> str:
        if self._name_resolver is None:
            return ""
        return self._name_resolver.resolve_product_name(product_line_id).strip()

    def _token_name(self, token_line_id: str) -> str:
        if self._name_resolver is None:
            return ""
        return self._name_resolver.resolve_token_name(token_line_id).strip()

    def _resolve_attributes(self, model_id: str) -> ModelAttributes:
        if self._name_resolver is None:
            return ModelAttributes()
        return self._name_resolver.resolve_model_attributes(model_id)
