"""TimezoneRecord — a timezone the user chose to keep."""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

UTC_SEPARATOR = ", "


def join_utc(identifiers: Iterable[str]) -> str:
    """Serialize region identifiers into the single persisted string."""
    return UTC_SEPARATOR.join(identifiers)


def split_utc(value: str) -> tuple[str, ...]:
    """Split a persisted (or hand-typed) identifier string back into a list."""
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class TimezoneRecord:
    """Immutable persisted timezone.

    Records are never edited: they are created from the form or from a
    catalog entry and destroyed by explicit deletion.

    Attributes:
        value:           Display name.
        abbreviation:    Short code, e.g. ``"PST"``.
        offset_hours:    Fractional hours from UTC.  Not range-checked.
        observes_dst:    Informational flag.  Never applied to the time.
        description:     Free text; the list is sorted on it.
        utc_identifiers: Ordered region identifiers.
        id:              Assigned once at creation.
    """

    value: str
    abbreviation: str = ""
    offset_hours: float = 0.0
    observes_dst: bool = False
    description: str = ""
    utc_identifiers: tuple[str, ...] = ()
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def utc(self) -> str:
        return join_utc(self.utc_identifiers)

    def to_row(self) -> dict[str, Any]:
        """Return the persisted column mapping."""
        return {
            "id": str(self.id),
            "value": self.value,
            "abbr": self.abbreviation,
            "offset": self.offset_hours,
            "isdst": self.observes_dst,
            "text": self.description,
            "utc": self.utc,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> TimezoneRecord:
        return cls(
            id=uuid.UUID(str(row["id"])),
            value=row["value"],
            abbreviation=row["abbr"],
            offset_hours=float(row["offset"]),
            observes_dst=bool(row["isdst"]),
            description=row["text"],
            utc_identifiers=split_utc(row["utc"] or ""),
        )
