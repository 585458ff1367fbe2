"""View models for list rows and the analog clock face.

These are plain data: a rendering layer positions text and rotates hand
shapes using the numbers here and nothing else.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clockzones.formatting import format_offset

if TYPE_CHECKING:
    from clockzones.catalog import TimezoneCatalogEntry
    from clockzones.projector import ProjectedTime
    from clockzones.record import TimezoneRecord

_ROMAN = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII")

BLACK = "#000000"
WHITE = "#FFFFFF"
WHITE_80 = "#FFFFFFCC"
BLUE = "#007AFF"

MARKER_RADIUS = 0.8


def utc_label(offset_hours: float) -> str:
    return f"UTC: {format_offset(offset_hours)}"


def roman_numeral(number: int) -> str:
    """Roman numeral for an hour marker (1..12), or ``""`` outside that range."""
    if 1 <= number <= 12:
        return _ROMAN[number - 1]
    return ""


@dataclass(frozen=True)
class TimezoneRow:
    """One saved timezone in the main list."""

    digital: str
    name: str
    utc_label: str

    @classmethod
    def build(cls, record: TimezoneRecord, projected: ProjectedTime) -> TimezoneRow:
        return cls(
            digital=projected.digital,
            name=record.value or "Unknown",
            utc_label=utc_label(record.offset_hours),
        )


@dataclass(frozen=True)
class CatalogRow:
    """One catalog entry in the search-and-add list."""

    name: str
    utc_label: str

    @classmethod
    def build(cls, entry: TimezoneCatalogEntry) -> CatalogRow:
        return cls(name=entry.value, utc_label=utc_label(entry.offset_hours))


@dataclass(frozen=True)
class Palette:
    background: str
    stroke: str
    numerals: str
    hour_hand: str
    minute_hand: str
    second_hand: str = BLUE

    @classmethod
    def for_time(cls, is_daytime: bool) -> Palette:
        """White face by day, black face by night."""
        if is_daytime:
            return cls(
                background=WHITE,
                stroke=BLACK,
                numerals=BLACK,
                hour_hand=BLACK,
                minute_hand=BLACK,
            )
        return cls(
            background=BLACK,
            stroke=WHITE,
            numerals=WHITE,
            hour_hand=WHITE,
            minute_hand=WHITE_80,
        )


@dataclass(frozen=True)
class Marker:
    label: str
    x: float
    y: float


@dataclass(frozen=True)
class Hand:
    """A capsule anchored at the center, rotated ``angle`` degrees clockwise."""

    name: str
    angle: float
    length: float
    width: float
    color: str


@dataclass(frozen=True)
class ClockFace:
    radius: float
    palette: Palette
    markers: tuple[Marker, ...]
    hands: tuple[Hand, ...]

    def hand(self, name: str) -> Hand | None:
        for hand in self.hands:
            if hand.name == name:
                return hand
        return None


def build_face(projected: ProjectedTime, *, radius: float, roman: bool = False) -> ClockFace:
    """Lay out a clock face of *radius* centered at ``(radius, radius)``.

    Markers sit on ``0.8 * radius``; marker ``i`` is at ``i * 30 - 90``
    degrees in screen coordinates (y grows downward), so 12 is on top.
    """
    palette = Palette.for_time(projected.is_daytime)
    label_radius = radius * MARKER_RADIUS

    markers = []
    for i in range(1, 13):
        theta = math.radians(i * 30 - 90)
        markers.append(
            Marker(
                label=roman_numeral(i) if roman else str(i),
                x=radius + math.cos(theta) * label_radius,
                y=radius + math.sin(theta) * label_radius,
            )
        )

    hands = (
        Hand("hour", projected.hour_angle, radius * 0.5, 6, palette.hour_hand),
        Hand("minute", projected.minute_angle, radius * 0.7, 4, palette.minute_hand),
        Hand("second", projected.second_angle, radius * 0.85, 2, palette.second_hand),
    )
    return ClockFace(radius=radius, palette=palette, markers=tuple(markers), hands=hands)
