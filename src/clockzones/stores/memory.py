"""InMemoryStore — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

from typing import Any

from clockzones.exceptions import StoreError
from clockzones.record import TimezoneRecord
from clockzones.stores.base import Store


class InMemoryStore(Store):
    """In-memory store keeping persisted rows in a dict.  Data is lost on process exit."""

    def __init__(self) -> None:
        self._rows: dict[str, dict[str, Any]] = {}

    async def list_records(self) -> list[TimezoneRecord]:
        rows = sorted(self._rows.values(), key=lambda row: row["text"])
        return [TimezoneRecord.from_row(row) for row in rows]

    async def insert(self, record: TimezoneRecord) -> None:
        key = str(record.id)
        if key in self._rows:
            raise StoreError("insert", f"record {key} already exists")
        self._rows[key] = record.to_row()

    async def delete(self, record: TimezoneRecord) -> None:
        self._rows.pop(str(record.id), None)
