"""Integration tests for the ShowInventoryDetail use case."""

from datetime import datetime, timedelta, timezone

import pytest
from structlog.testing import capture_logs

from stockview.application.show_inventory_detail import ShowInventoryDetailHandler
from stockview.domain.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InvalidInventoryError,
    ValidationError,
)
from stockview.domain.model.blueprint import ModelRef, ProductBlueprintPatch, TokenBlueprintPatch
from stockview.domain.model.inventory import Inventory, StockLedgerEntry
from stockview.domain.model.value_objects import ModelAttributes
from tests.fakes import (
    BrokenProductBlueprintRepository,
    FakeInventoryRepository,
    FakeNameResolver,
    FakeProductBlueprintRepository,
    FakeTokenBlueprintRepository,
)

MODELS = {
    "modelA": ModelAttributes(model_number="A-001", size="S", color="Black", rgb=0),
    "modelB": ModelAttributes(model_number="B-001", size="M", color="White", rgb=0xFFFFFF),
}


def _setup(stock=None, model_refs=None, inventory=None, resolver=None):
    inventory = inventory or Inventory(
        id="pb1__tb1",
        product_line_id="pb1",
        token_line_id="tb1",
        stock=stock if stock is not None else {},
        updated_at=datetime(2025, 3, 4, 12, 30, tzinfo=timezone.utc),
    )
    product_repo = FakeProductBlueprintRepository([
        ProductBlueprintPatch(
            product_line_id="pb1",
            product_name="Logo Tee",
            brand_id="br1",
            company_id="co1",
            model_refs=tuple(model_refs or ()),
        )
    ])
    token_repo = FakeTokenBlueprintRepository([
        TokenBlueprintPatch(token_line_id="tb1", token_name="Club Pass", brand_id="br1"),
    ])
    resolver = resolver or FakeNameResolver(brands={"br1": "North Works"}, models=MODELS)
    return ShowInventoryDetailHandler(
        inventory_repo=FakeInventoryRepository([inventory]),
        product_blueprint_repo=product_repo,
        token_blueprint_repo=token_repo,
        name_resolver=resolver,
    )


class TestPopulationDrivenRows:

    def test_unstocked_model_still_listed_with_zero(self):
        handler = _setup(
            stock={"modelA": StockLedgerEntry(accumulation=3)},
            model_refs=[ModelRef("modelA", 1), ModelRef("modelB", 2)],
        )

        dto = handler.handle("pb1__tb1")

        assert [(r.model_id, r.stock) for r in dto.rows] == [("modelA", 3), ("modelB", 0)]
        assert dto.total_stock == 3

    def test_rows_follow_population_order_not_stock(self):
        handler = _setup(
            stock={
                "modelA": StockLedgerEntry(accumulation=1),
                "modelB": StockLedgerEntry(accumulation=9),
            },
            model_refs=[ModelRef("modelB", 1), ModelRef("modelA", 2)],
        )

        dto = handler.handle("pb1__tb1")

        assert [r.model_id for r in dto.rows] == ["modelB", "modelA"]

    def test_stock_is_reconciled_availability(self):
        handler = _setup(
            stock={
                "modelA": StockLedgerEntry(
                    accumulation=10, reserved_count=3, reserved_by_order={"o1": 2, "o2": 4},
                ),
            },
            model_refs=[ModelRef("modelA", 1)],
        )

        dto = handler.handle("pb1__tb1")

        assert dto.rows[0].stock == 4
        assert dto.total_stock == 4

    def test_ledger_only_models_are_not_added_to_population(self):
        handler = _setup(
            stock={
                "modelA": StockLedgerEntry(accumulation=2),
                "stray": StockLedgerEntry(accumulation=5),
            },
            model_refs=[ModelRef("modelA", 1)],
        )

        dto = handler.handle("pb1__tb1")

        assert [r.model_id for r in dto.rows] == ["modelA"]
        assert dto.total_stock == 2


class TestLedgerFallback:

    def test_empty_population_falls_back_to_sorted_ledger_keys(self):
        handler = _setup(
            stock={
                "modelB": StockLedgerEntry(accumulation=2),
                "modelA": StockLedgerEntry(accumulation=1),
            },
            model_refs=[],
        )

        dto = handler.handle("pb1__tb1")

        assert [r.model_id for r in dto.rows] == ["modelA", "modelB"]
        assert dto.total_stock == 3

    def test_unreadable_blueprint_falls_back_to_ledger(self):
        inventory = Inventory(
            id="pb1__tb1", product_line_id="pb1", token_line_id="tb1",
            stock={"modelA": StockLedgerEntry(accumulation=4)},
        )
        handler = ShowInventoryDetailHandler(
            inventory_repo=FakeInventoryRepository([inventory]),
            product_blueprint_repo=BrokenProductBlueprintRepository(),
        )

        dto = handler.handle("pb1__tb1")

        assert [(r.model_id, r.stock) for r in dto.rows] == [("modelA", 4)]
        assert dto.product_blueprint_patch is None
        assert dto.token_blueprint_patch is None

    def test_empty_population_and_empty_ledger(self):
        dto = _setup(stock={}, model_refs=[]).handle("pb1__tb1")
        assert dto.rows == []
        assert dto.total_stock == 0


class TestDisplayAttributes:

    def test_resolved_attributes(self):
        handler = _setup(
            stock={"modelB": StockLedgerEntry(accumulation=1)},
            model_refs=[ModelRef("modelB", 1)],
        )

        row = handler.handle("pb1__tb1").rows[0]

        assert (row.model_number, row.size, row.color, row.rgb) == ("B-001", "M", "White", 0xFFFFFF)

    def test_missing_attributes_use_placeholder_and_warn(self):
        handler = _setup(
            stock={"modelX": StockLedgerEntry(accumulation=1)},
            model_refs=[ModelRef("modelX", 1)],
        )

        with capture_logs() as logs:
            row = handler.handle("pb1__tb1").rows[0]

        assert (row.model_number, row.size, row.color, row.rgb) == ("-", "-", "-", None)
        warnings = [log for log in logs if log["event"] == "model_attributes_missing"]
        assert len(warnings) == 1
        assert warnings[0]["model_id"] == "modelX"
        assert warnings[0]["missing"] == ["model_number", "size", "color", "rgb"]


class TestPatchesAndMetadata:

    def test_patches_carry_brand_name(self):
        dto = _setup(model_refs=[ModelRef("modelA", 1)]).handle("pb1__tb1")

        assert dto.product_blueprint_patch.brand_name == "North Works"
        assert dto.token_blueprint_patch.brand_name == "North Works"
        assert dto.token_blueprint_patch.token_name == "Club Pass"

    def test_unknown_brand_leaves_name_blank(self):
        resolver = FakeNameResolver(models=MODELS)
        dto = _setup(model_refs=[ModelRef("modelA", 1)], resolver=resolver).handle("pb1__tb1")

        assert dto.product_blueprint_patch is not None
        assert dto.product_blueprint_patch.brand_name == ""

    def test_identity_fields_and_updated_at(self):
        dto = _setup().handle(" pb1__tb1 ")

        assert dto.inventory_id == "pb1__tb1"
        assert dto.product_line_id == "pb1"
        assert dto.token_line_id == "tb1"
        assert dto.updated_at == "2025-03-04T12:30:00Z"

    def test_updated_at_converted_to_utc(self):
        tokyo = timezone(timedelta(hours=9))
        inventory = Inventory(
            id="pb1__tb1", product_line_id="pb1", token_line_id="tb1",
            created_at=datetime(2025, 3, 5, 9, 0, tzinfo=tokyo),
        )
        dto = _setup(inventory=inventory).handle("pb1__tb1")
        assert dto.updated_at == "2025-03-05T00:00:00Z"

    def test_updated_at_empty_without_timestamps(self):
        inventory = Inventory(id="pb1__tb1", product_line_id="pb1", token_line_id="tb1")
        assert _setup(inventory=inventory).handle("pb1__tb1").updated_at == ""


class TestFailures:

    def test_unknown_inventory_not_found(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            _setup().handle("pb9__tb9")

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError, match="required"):
            _setup().handle("  ")

    def test_missing_token_line_is_invalid(self):
        inventory = Inventory(id="pb1__tb1", product_line_id="pb1", token_line_id="")
        with pytest.raises(InvalidInventoryError, match="token line"):
            _setup(inventory=inventory).handle("pb1__tb1")

    def test_missing_product_line_is_invalid_even_if_id_parses(self):
        inventory = Inventory(id="pb1__tb1", product_line_id=" ", token_line_id="tb1")
        with pytest.raises(InvalidInventoryError, match="product line"):
            _setup(inventory=inventory).handle("pb1__tb1")

    def test_unconfigured_repository(self):
        with pytest.raises(ConfigurationError):
            ShowInventoryDetailHandler(inventory_repo=None).handle("pb1__tb1")
