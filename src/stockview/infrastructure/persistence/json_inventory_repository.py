"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

from datetime import datetime

from stockview.domain.exceptions import RepositoryError
from stockview.domain.model.inventory import Inventory, StockLedgerEntry
from stockview.domain.repository.inventory_repository import InventoryRepository
from stockview.infrastructure.persistence.json_file import JsonRecordFile


class JsonInventoryRepository(JsonRecordFile, InventoryRepository):

    # --- InventoryRepository interface ----------------------------------------

    def get_by_id(self, inventory_id: str) -> Inventory | None:
        raw = self.find_record(inventory_id)
        return self._to_domain(raw) if raw is not None else None

    def list_by_product_line(self, product_line_id: str) -> list[Inventory]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if str(raw.get("product_line_id", "")).strip() == product_line_id.strip()
        ]

    # --- Serialization --------------------------------------------------------

    @classmethod
    def _to_domain(cls, raw: dict) -> Inventory:
        return Inventory(
            id=str(raw.get("id", "")).strip(),
            product_line_id=str(raw.get("product_line_id") or ""),
            token_line_id=str(raw.get("token_line_id") or ""),
            model_ids=frozenset(raw.get("model_ids") or ()),
            stock={
                str(model_id).strip(): cls._entry_to_domain(entry)
                for model_id, entry in (raw.get("stock") or {}).items()
            },
            created_at=_parse_timestamp(raw.get("created_at")),
            updated_at=_parse_timestamp(raw.get("updated_at")),
        )

    @staticmethod
    def _entry_to_domain(raw: dict) -> StockLedgerEntry:
        return StockLedgerEntry(
            accumulation=int(raw.get("accumulation") or 0),
            reserved_count=int(raw.get("reserved_count") or 0),
            reserved_by_order={
                str(order_id): int(qty or 0)
                for order_id, qty in (raw.get("reserved_by_order") or {}).items()
            },
            products=tuple(raw.get("products") or ()),
        )


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise RepositoryError(f"Invalid timestamp {value!r}") from exc
