"""clockzones — world clocks driven by fixed UTC offsets.

A saved timezone is a name plus a fractional-hour offset.  Its clock is
the current UTC instant shifted by that offset and read off a zero-offset
day: no timezone database, no daylight-saving rules.
"""

import logging

from clockzones.catalog import (
    TimezoneCatalogEntry,
    decode_catalog,
    filter_entries,
    load_catalog,
)
from clockzones.exceptions import (
    CatalogError,
    ClockZonesError,
    StoreError,
    StoreInitError,
)
from clockzones.formatting import format_offset
from clockzones.manager import TimezoneManager
from clockzones.projector import ProjectedTime, TimeProjector, project
from clockzones.record import TimezoneRecord
from clockzones.ticker import Ticker

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CatalogError",
    "ClockZonesError",
    "ProjectedTime",
    "StoreError",
    "StoreInitError",
    "Ticker",
    "TimeProjector",
    "TimezoneCatalogEntry",
    "TimezoneManager",
    "TimezoneRecord",
    "decode_catalog",
    "filter_entries",
    "format_offset",
    "load_catalog",
    "project",
]
