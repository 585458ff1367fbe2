"""Storage backends for saved timezones."""

from clockzones.stores.base import Store
from clockzones.stores.memory import InMemoryStore
from clockzones.stores.sqlite import SQLiteStore

__all__ = ["InMemoryStore", "SQLiteStore", "Store"]
