"""Store protocol — persistence for the user's saved timezones."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clockzones.record import TimezoneRecord


class Store(ABC):
    """Abstract base for all storage backends.

    A store holds :class:`TimezoneRecord` rows keyed by ``id``.  All
    mutations go through a single store instance; there is no locking
    beyond that.
    """

    async def initialize(self) -> None:
        """Prepare the backend.  Raise ``StoreInitError`` if that is impossible."""

    async def close(self) -> None:
        """Release backend resources."""

    @abstractmethod
    async def list_records(self) -> list[TimezoneRecord]:
        """Return every record, sorted by description ascending."""
        ...

    @abstractmethod
    async def insert(self, record: TimezoneRecord) -> None:
        """Persist a new record.  Raise ``StoreError`` if its id is taken."""
        ...

    @abstractmethod
    async def delete(self, record: TimezoneRecord) -> None:
        """Remove a record permanently.  No-op if it is not stored."""
        ...
