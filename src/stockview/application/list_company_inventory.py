"""Application service: List Company Inventory use case (query).

Produces the company-wide management view: one row per product line,
token line and model number across every inventory the tenant owns.
Inventories sharing a key are summed.  An inventory with an empty ledger
still gets a ``"-"`` row so it is visible before any model is stocked.

Names are memoized in plain dicts that live for a single ``handle`` call;
nothing is cached across requests.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from stockview.application.dto import ManagementRowDTO, RequestContext, display
from stockview.domain.exceptions import ConfigurationError, MissingTenantError
from stockview.domain.repository.blueprint_repository import ProductBlueprintRepository
from stockview.domain.repository.inventory_repository import InventoryRepository
from stockview.domain.service.availability import compute_availability
from stockview.domain.service.name_resolver import NameResolver

logger = structlog.get_logger(__name__)


@dataclass
class _Totals:
    available: int = 0
    reserved: int = 0


class ListCompanyInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository | None,
        product_blueprint_repo: ProductBlueprintRepository | None,
        name_resolver: NameResolver | None = None,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._product_blueprint_repo = product_blueprint_repo
        self._name_resolver = name_resolver

    def handle(self, context: RequestContext) -> list[ManagementRowDTO]:
        if self._inventory_repo is None or self._product_blueprint_repo is None:
            raise ConfigurationError("inventory query repositories are not configured")

        tenant_id = (context.tenant_id or "").strip()
        if not tenant_id:
            raise MissingTenantError("tenant id is missing from the request context")

        product_line_ids = self._product_blueprint_repo.list_ids_by_tenant(tenant_id)
        if not product_line_ids:
            return []

        # a None model number keys the empty-ledger row of an inventory
        groups: dict[tuple[str, str, str | None], _Totals] = {}
        product_names: dict[str, str] = {}
        token_names: dict[str, str] = {}
        model_numbers: dict[str, str] = {}

        for product_line_id in product_line_ids:
            product_line_id = product_line_id.strip()
            if not product_line_id:
                continue
            if product_line_id not in product_names:
                product_names[product_line_id] = self._product_name(product_line_id)

            for inventory in self._inventory_repo.list_by_product_line(product_line_id):
                token_line_id = inventory.token_line_id.strip()
                if not token_line_id:
                    logger.warning(
                        "inventory_without_token_line",
                        inventory_id=inventory.id,
                        product_line_id=product_line_id,
                    )
                    continue
                if token_line_id not in token_names:
                    token_names[token_line_id] = self._token_name(token_line_id)

                if not inventory.stock:
                    groups.setdefault((product_line_id, token_line_id, None), _Totals())
                    continue

                for model_id, entry in inventory.stock.items():
                    model_id = model_id.strip()
                    if not model_id:
                        continue
                    if model_id not in model_numbers:
                        model_numbers[model_id] = self._model_number(model_id)

                    figures = compute_availability(entry, model_id)
                    totals = groups.setdefault(
                        (product_line_id, token_line_id, model_numbers[model_id]),
                        _Totals(),
                    )
                    totals.available += figures.available
                    totals.reserved += figures.reserved

        rows = [
            ManagementRowDTO(
                product_line_id=product_line_id,
                product_name=product_names[product_line_id],
                token_line_id=token_line_id,
                token_name=token_names[token_line_id],
                model_number=display(model_number),
                available_stock=totals.available,
                reserved_count=totals.reserved,
            )
            for (product_line_id, token_line_id, model_number), totals in groups.items()
        ]
        rows.sort(
            key=lambda row: (
                row.product_name,
                row.token_name,
                row.model_number,
                row.available_stock,
                row.product_line_id,
                row.token_line_id,
            )
        )
        return rows

    # --- Name resolution (fall back to the raw id) ----------------------------

    def _product_name(self, product_line_id: str) -> str:
        name = ""
        if self._name_resolver is not None:
            name = self._name_resolver.resolve_product_name(product_line_id).strip()
        return name or product_line_id

    def _token_name(self, token_line_id: str) -> str:
        name = ""
        if self._name_resolver is not None:
            name = self._name_resolver.resolve_token_name(token_line_id).strip()
        return name or token_line_id

    def _model_number(self, model_id: str) -> str:
        number = None
        if self._name_resolver is not None:
            number = self._name_resolver.resolve_model_attributes(model_id).model_number
        return (number or "").strip() or model_id
