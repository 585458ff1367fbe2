"""TimezoneManager — the central orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from clockzones.catalog import filter_entries
from clockzones.exceptions import StoreError
from clockzones.projector import TimeProjector
from clockzones.record import TimezoneRecord, split_utc
from clockzones.stores.memory import InMemoryStore
from clockzones.views import TimezoneRow

if TYPE_CHECKING:
    from clockzones._internal.clock import Clock
    from clockzones.catalog import TimezoneCatalogEntry
    from clockzones.projector import ProjectedTime
    from clockzones.stores.base import Store

logger = logging.getLogger(__name__)


class TimezoneManager:
    """Saved timezones, the catalog to pick new ones from, and their clocks.

    Mutations are save-or-log: a :class:`StoreError` is logged and the
    call reports failure, leaving the store as it was.  Nothing is retried.

    Parameters:
        store:   Persistence backend.  Defaults to :class:`InMemoryStore`
                 when omitted.
        catalog: Entries offered for search-and-add.
        clock:   Time source for projections.
    """

    def __init__(
        self,
        store: Store | None = None,
        *,
        catalog: Sequence[TimezoneCatalogEntry] = (),
        clock: Clock | None = None,
    ) -> None:
        self._store: Store = store if store is not None else InMemoryStore()
        self._catalog: list[TimezoneCatalogEntry] = list(catalog)
        self._projector = TimeProjector(clock)

    # ── lifecycle ────────────────────────────────────────────

    async def open(self) -> None:
        """Initialize the store.  ``StoreInitError`` is not caught here."""
        await self._store.initialize()

    async def close(self) -> None:
        await self._store.close()

    # ── saved timezones ──────────────────────────────────────

    async def list_timezones(self, query: str = "") -> list[TimezoneRecord]:
        """Saved timezones sorted by description, narrowed by *query*."""
        return filter_entries(await self._store.list_records(), query)

    async def add(self, record: TimezoneRecord) -> bool:
        try:
            await self._store.insert(record)
        except StoreError as exc:
            logger.error("Failed to save timezone %r: %s", record.value, exc)
            return False
        logger.info("Timezone added: %s", record.value)
        return True

    async def add_from_catalog(self, entry: TimezoneCatalogEntry) -> TimezoneRecord | None:
        """Copy *entry* into a new saved record.  Returns ``None`` if saving failed."""
        record = entry.to_record()
        return record if await self.add(record) else None

    async def create(
        self,
        *,
        value: str,
        abbreviation: str = "",
        offset_hours: float = 0.0,
        observes_dst: bool = False,
        description: str = "",
        utc: str = "",
    ) -> TimezoneRecord | None:
        """Save a hand-entered timezone.  *utc* is a comma-separated identifier list."""
        record = TimezoneRecord(
            value=value,
            abbreviation=abbreviation,
            offset_hours=offset_hours,
            observes_dst=observes_dst,
            description=description,
            utc_identifiers=split_utc(utc),
        )
        return record if await self.add(record) else None

    async def remove(self, record: TimezoneRecord) -> bool:
        try:
            await self._store.delete(record)
        except StoreError as exc:
            logger.error("Failed to delete timezone %r: %s", record.value, exc)
            return False
        logger.info("Timezone deleted: %s", record.value)
        return True

    # ── catalog ──────────────────────────────────────────────

    def search_catalog(self, query: str = "") -> list[TimezoneCatalogEntry]:
        return filter_entries(self._catalog, query)

    # ── clocks ───────────────────────────────────────────────

    def project(self, record: TimezoneRecord, at: datetime | None = None) -> ProjectedTime:
        """Project *at* (default: now) into *record*'s offset."""
        if at is None:
            return self._projector.now(record.offset_hours)
        return self._projector.project(at, record.offset_hours)

    async def rows(self, query: str = "", at: datetime | None = None) -> list[TimezoneRow]:
        """Main-list rows, all read off the same instant."""
        at = at or self._projector.clock.now()
        return [
            TimezoneRow.build(record, self.project(record, at))
            for record in await self.list_timezones(query)
        ]

    # ── introspection ────────────────────────────────────────

    @property
    def store(self) -> Store:
        return self._store

    @property
    def catalog(self) -> list[TimezoneCatalogEntry]:
        return list(self._catalog)

    @property
    def projector(self) -> TimeProjector:
        return self._projector
