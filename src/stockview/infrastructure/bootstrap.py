"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from stockview.application.blueprint_enrichment import ShowTokenBlueprintHandler
from stockview.application.build_price_rows import BuildPriceRowsHandler
from stockview.application.list_company_inventory import ListCompanyInventoryHandler
from stockview.application.list_inventory_ids import ListInventoryIdsHandler
from stockview.application.show_inventory_detail import ShowInventoryDetailHandler
from stockview.infrastructure.persistence.json_blueprint_repository import (
    JsonProductBlueprintRepository,
    JsonTokenBlueprintRepository,
)
from stockview.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from stockview.infrastructure.persistence.json_name_resolver import JsonNameResolver

# Resolve data directory relative to the project root unless overridden.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.environ.get("STOCKVIEW_DATA_DIR") or _DEFAULT_DATA_DIR)


def log_level() -> str:
    return os.environ.get("STOCKVIEW_LOG_LEVEL", "WARNING")


def log_format() -> str:
    return os.environ.get("STOCKVIEW_LOG_FORMAT", "console")


# --- Adapters -----------------------------------------------------------------


def inventory_repository() -> JsonInventoryRepository:
    return JsonInventoryRepository(data_dir() / "inventories.json")


def product_blueprint_repository() -> JsonProductBlueprintRepository:
    return JsonProductBlueprintRepository(data_dir() / "product_blueprints.json")


def token_blueprint_repository() -> JsonTokenBlueprintRepository:
    return JsonTokenBlueprintRepository(data_dir() / "token_blueprints.json")


def name_resolver() -> JsonNameResolver:
    return JsonNameResolver(data_dir())


# --- Handlers -----------------------------------------------------------------


def list_company_inventory_handler() -> ListCompanyInventoryHandler:
    return ListCompanyInventoryHandler(
        inventory_repo=inventory_repository(),
        product_blueprint_repo=product_blueprint_repository(),
        name_resolver=name_resolver(),
    )


def show_inventory_detail_handler() -> ShowInventoryDetailHandler:
    return ShowInventoryDetailHandler(
        inventory_repo=inventory_repository(),
        product_blueprint_repo=product_blueprint_repository(),
        token_blueprint_repo=token_blueprint_repository(),
        name_resolver=name_resolver(),
    )


def build_price_rows_handler() -> BuildPriceRowsHandler:
    return BuildPriceRowsHandler(
        product_blueprint_repo=product_blueprint_repository(),
        inventory_repo=inventory_repository(),
        token_blueprint_repo=token_blueprint_repository(),
        name_resolver=name_resolver(),
    )


def list_inventory_ids_handler() -> ListInventoryIdsHandler:
    return ListInventoryIdsHandler(inventory_repo=inventory_repository())


def show_token_blueprint_handler() -> ShowTokenBlueprintHandler:
    return ShowTokenBlueprintHandler(
        token_blueprint_repo=token_blueprint_repository(),
        name_resolver=name_resolver(),
    )
