"""JSON-file-backed implementations of the blueprint patch repositories."""

from __future__ import annotations

from stockview.domain.model.blueprint import ModelRef, ProductBlueprintPatch, TokenBlueprintPatch
from stockview.domain.repository.blueprint_repository import (
    ProductBlueprintRepository,
    TokenBlueprintRepository,
)
from stockview.infrastructure.persistence.json_file import JsonRecordFile


class JsonProductBlueprintRepository(JsonRecordFile, ProductBlueprintRepository):

    def list_ids_by_tenant(self, tenant_id: str) -> list[str]:
        return [
            str(raw["id"])
            for raw in self._load_raw()
            if str(raw.get("company_id", "")).strip() == tenant_id.strip()
            and raw.get("id")
        ]

    def get_patch(self, product_line_id: str) -> ProductBlueprintPatch | None:
        raw = self.find_record(product_line_id)
        return self._to_domain(raw) if raw is not None else None

    @staticmethod
    def _to_domain(raw: dict) -> ProductBlueprintPatch:
        return ProductBlueprintPatch(
            product_line_id=str(raw["id"]),
            product_name=raw.get("product_name", ""),
            brand_id=raw.get("brand_id", ""),
            brand_name=raw.get("brand_name", ""),
            company_id=raw.get("company_id", ""),
            model_refs=tuple(
                ModelRef(
                    model_id=str(ref.get("model_id", "")),
                    display_order=int(ref.get("display_order") or 0),
                )
                for ref in raw.get("model_refs") or ()
            ),
        )


class JsonTokenBlueprintRepository(JsonRecordFile, TokenBlueprintRepository):

    def get_patch(self, token_line_id: str) -> TokenBlueprintPatch | None:
        raw = self.find_record(token_line_id)
        if raw is None:
            return None
        return TokenBlueprintPatch(
            token_line_id=str(raw["id"]),
            token_name=raw.get("token_name", ""),
            symbol=raw.get("symbol", ""),
            brand_id=raw.get("brand_id", ""),
            brand_name=raw.get("brand_name", ""),
            company_id=raw.get("company_id", ""),
        )
