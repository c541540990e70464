"""Shared file handling for the JSON-file-backed read adapters.

Each data file holds a JSON array of records.  A missing file is created
empty; a file that cannot be parsed raises RepositoryError.
"""

from __future__ import annotations

import json
from pathlib import Path

from stockview.domain.exceptions import RepositoryError


class JsonRecordFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RepositoryError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(records, list):
            raise RepositoryError(f"{self._file_path} must contain a JSON array")
        return records

    def find_record(self, record_id: str) -> dict | None:
        for raw in self._load_raw():
            if str(raw.get("id", "")).strip() == record_id.strip():
                return raw
        return None

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
