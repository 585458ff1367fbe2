"""Shared test fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from clockzones import TimezoneManager, TimezoneRecord, decode_catalog
from clockzones.stores import InMemoryStore

PST_JSON = """
{
  "value": "Pacific Standard Time",
  "abbr": "PST",
  "offset": -8,
  "isdst": false,
  "text": "(UTC-08:00) Pacific Standard Time (US & Canada)",
  "utc": ["America/Los_Angeles", "America/Tijuana"]
}
"""

CATALOG_JSON = f"""
[
  {PST_JSON},
  {{"value": "India Standard Time", "abbr": "IST", "offset": 5.5, "isdst": false,
    "text": "(UTC+05:30) Chennai, Kolkata, Mumbai, New Delhi", "utc": ["Asia/Kolkata"]}},
  {{"value": "Tokyo Standard Time", "abbr": "TST", "offset": 9, "isdst": false,
    "text": "(UTC+09:00) Osaka, Sapporo, Tokyo", "utc": ["Asia/Tokyo"]}}
]
"""


class FakeClock:
    def __init__(self, start: datetime | None = None):
        self._now = start or datetime(2022, 1, 1, 12, 0, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def catalog():
    return decode_catalog(CATALOG_JSON)


@pytest.fixture
def manager(store, catalog, clock):
    return TimezoneManager(store, catalog=catalog, clock=clock)


@pytest.fixture
def tokyo():
    return TimezoneRecord(
        value="Tokyo Standard Time",
        abbreviation="TST",
        offset_hours=9,
        description="(UTC+09:00) Osaka, Sapporo, Tokyo",
        utc_identifiers=("Asia/Tokyo",),
    )


@pytest.fixture
def kolkata():
    return TimezoneRecord(
        value="India Standard Time",
        abbreviation="IST",
        offset_hours=5.5,
        description="(UTC+05:30) Chennai, Kolkata, Mumbai, New Delhi",
        utc_identifiers=("Asia/Kolkata",),
    )


@pytest.fixture
def pst_json():
    return PST_JSON
