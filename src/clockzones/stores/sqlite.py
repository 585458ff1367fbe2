"""SQLiteStore — durable, single-file storage backend using aiosqlite."""

from __future__ import annotations

import sqlite3

try:
    import aiosqlite
except ImportError as exc:
    raise ImportError(
        "SQLiteStore requires the 'aiosqlite' package. "
        "Install it with: pip install aiosqlite"
    ) from exc

from clockzones.exceptions import StoreError, StoreInitError
from clockzones.record import TimezoneRecord
from clockzones.stores.base import Store

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS timezones (
    id     TEXT PRIMARY KEY,
    value  TEXT NOT NULL,
    abbr   TEXT NOT NULL,
    "offset" REAL NOT NULL,
    isdst  INTEGER NOT NULL,
    text   TEXT NOT NULL,
    utc    TEXT NOT NULL
)
"""

_COLUMNS = ("id", "value", "abbr", "offset", "isdst", "text", "utc")
_COLUMN_LIST = ", ".join(f'"{column}"' for column in _COLUMNS)


class SQLiteStore(Store):
    """Persistent store backed by a single SQLite file.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
    """

    def __init__(self, db_path: str = "clockzones.db") -> None:
        self._db_path = db_path
        self._db: aiosqlite.Connection | None = None

    async def initialize(self) -> None:
        await self._connect()

    async def _connect(self) -> aiosqlite.Connection:
        if self._db is None:
            try:
                db = await aiosqlite.connect(self._db_path)
            except sqlite3.Error as exc:
                raise StoreInitError(self._db_path, str(exc)) from exc
            try:
                await db.execute(_CREATE_TABLE)
                await db.commit()
            except sqlite3.Error as exc:
                await db.close()
                raise StoreInitError(self._db_path, str(exc)) from exc
            self._db = db
        return self._db

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    # ── Store protocol ───────────────────────────────────────

    async def list_records(self) -> list[TimezoneRecord]:
        db = await self._connect()
        try:
            cursor = await db.execute(
                f"SELECT {_COLUMN_LIST} FROM timezones ORDER BY text ASC"
            )
            rows = await cursor.fetchall()
        except sqlite3.Error as exc:
            raise StoreError("list", str(exc)) from exc
        return [TimezoneRecord.from_row(dict(zip(_COLUMNS, row, strict=True))) for row in rows]

    async def insert(self, record: TimezoneRecord) -> None:
        db = await self._connect()
        row = record.to_row()
        try:
            await db.execute(
                f"INSERT INTO timezones ({_COLUMN_LIST}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                tuple(row[column] for column in _COLUMNS),
            )
            await db.commit()
        except sqlite3.Error as exc:
            await db.rollback()
            raise StoreError("insert", str(exc)) from exc

    async def delete(self, record: TimezoneRecord) -> None:
        db = await self._connect()
        try:
            await db.execute("DELETE FROM timezones WHERE id = ?", (str(record.id),))
            await db.commit()
        except sqlite3.Error as exc:
            await db.rollback()
            raise StoreError("delete", str(exc)) from exc
