"""Bundled timezone catalog: decoding, loading and search.

The catalog is a static JSON array shipped as package data.  Entries are
read-only templates; selecting one copies its fields into a new
:class:`~clockzones.record.TimezoneRecord`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from clockzones.exceptions import CatalogError
from clockzones.record import TimezoneRecord

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = "timezones.json"


class TimezoneCatalogEntry(BaseModel):
    """Single dataset entry.

    Field names follow the record model; the JSON keys (``abbr``,
    ``offset``, ``isdst``, ``text``, ``utc``) are accepted as aliases.
    Decoding is strict so a mistyped field fails instead of being coerced.
    """

    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)

    value: str
    abbreviation: str = Field(alias="abbr")
    offset_hours: float = Field(alias="offset")
    observes_dst: bool = Field(alias="isdst")
    description: str = Field(alias="text")
    utc_identifiers: list[str] = Field(alias="utc")

    @property
    def key(self) -> str:
        """Identity within the dataset."""
        return self.description

    def to_record(self) -> TimezoneRecord:
        """Copy this entry into a new record with a fresh id."""
        return TimezoneRecord(
            value=self.value,
            abbreviation=self.abbreviation,
            offset_hours=self.offset_hours,
            observes_dst=self.observes_dst,
            description=self.description,
            utc_identifiers=tuple(self.utc_identifiers),
        )


_CATALOG_ADAPTER = TypeAdapter(list[TimezoneCatalogEntry])


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        loc = error["loc"]
        if len(loc) >= 2 and isinstance(loc[0], int):
            where = f"entry {loc[0]}, field '{loc[1]}'"
        elif loc:
            where = f"at {'.'.join(str(part) for part in loc)}"
        else:
            where = "document"
        problems.append(f"{where}: {error['msg']}")
    return "; ".join(problems)


def decode_catalog(data: bytes | str) -> list[TimezoneCatalogEntry]:
    """Decode a JSON array of catalog entries.

    Raises:
        CatalogError: If the document is not valid JSON, or any entry is
            missing a field or carries a field of the wrong type.
    """
    try:
        return _CATALOG_ADAPTER.validate_json(data)
    except ValidationError as exc:
        raise CatalogError(_describe(exc)) from exc


def load_catalog(path: str | Path | None = None) -> list[TimezoneCatalogEntry]:
    """Load the bundled catalog, or the file at *path*.

    A missing file or a decode failure only disables search, so both are
    logged and an empty catalog is returned.
    """
    try:
        if path is None:
            data = resources.files("clockzones").joinpath("data", BUNDLED_CATALOG).read_bytes()
        else:
            data = Path(path).read_bytes()
    except FileNotFoundError:
        logger.warning("Timezone catalog not found: %s", path or BUNDLED_CATALOG)
        return []

    try:
        entries = decode_catalog(data)
    except CatalogError as exc:
        logger.error("Failed to load timezone catalog: %s", exc)
        return []

    logger.debug("Loaded %d catalog entries", len(entries))
    return entries


class _Searchable(Protocol):
    @property
    def value(self) -> str: ...

    @property
    def description(self) -> str: ...


T = TypeVar("T", bound=_Searchable)


def filter_entries(items: Iterable[T], query: str) -> list[T]:
    """Return the items whose description or value contains *query*.

    Matching is case-insensitive.  An empty query keeps every item, in
    input order.
    """
    if not query:
        return list(items)
    needle = query.casefold()
    return [
        item
        for item in items
        if needle in item.description.casefold() or needle in item.value.casefold()
    ]
