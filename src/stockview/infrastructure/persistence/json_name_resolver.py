"""JSON-file-backed implementation of the NameResolver port.

Reads names from the same data directory as the repositories.  Lookups
never raise: an unreadable file is logged and treated as a miss.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from stockview.domain.exceptions import RepositoryError
from stockview.domain.model.value_objects import ModelAttributes
from stockview.domain.service.name_resolver import NameResolver
from stockview.infrastructure.persistence.json_file import JsonRecordFile

logger = structlog.get_logger(__name__)


class JsonNameResolver(NameResolver):

    def __init__(self, data_dir: Path) -> None:
        self._products = JsonRecordFile(data_dir / "product_blueprints.json")
        self._tokens = JsonRecordFile(data_dir / "token_blueprints.json")
        self._brands = JsonRecordFile(data_dir / "brands.json")
        self._models = JsonRecordFile(data_dir / "models.json")

    def resolve_product_name(self, product_line_id: str) -> str:
        return str(self._lookup(self._products, product_line_id).get("product_name") or "")

    def resolve_token_name(self, token_line_id: str) -> str:
        return str(self._lookup(self._tokens, token_line_id).get("token_name") or "")

    def resolve_brand_name(self, brand_id: str) -> str:
        return str(self._lookup(self._brands, brand_id).get("name") or "")

    def resolve_model_attributes(self, model_id: str) -> ModelAttributes:
        raw = self._lookup(self._models, model_id)
        return ModelAttributes(
            model_number=_text(raw.get("model_number")),
            size=_text(raw.get("size")),
            color=_text(raw.get("color")),
            rgb=self._rgb(model_id, raw.get("rgb")),
        )

    @staticmethod
    def _rgb(model_id: str, value) -> int | None:
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("model_rgb_invalid", model_id=model_id, rgb=value)
            return None

    @staticmethod
    def _lookup(records: JsonRecordFile, record_id: str) -> dict:
        if not record_id.strip():
            return {}
        try:
            return records.find_record(record_id) or {}
        except RepositoryError as exc:
            logger.warning("name_lookup_failed", record_id=record_id, error=str(exc))
            return {}


def _text(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
