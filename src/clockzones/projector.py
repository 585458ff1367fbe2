"""TimeProjector — shifts a UTC instant by a fractional-hour offset and reads a clock off it."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from clockzones._internal.clock import SystemClock

if TYPE_CHECKING:
    from clockzones._internal.clock import Clock

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_US_TICK = timedelta(microseconds=1)

_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE
_US_PER_DAY = 24 * _US_PER_HOUR

DAY_START_HOUR = 8
NIGHT_START_HOUR = 18


@dataclass(frozen=True)
class ProjectedTime:
    """Wall-clock reading of a projected instant.

    Attributes:
        hour24:       Hour of day, ``0..23``.
        minute:       ``0..59``.
        second:       ``0..59``.
        subsecond:    Fraction of the current second, ``[0, 1)``.
        hour12:       ``hour24 % 12``; the base of the hour hand (0, not 12).
        is_daytime:   ``True`` between 08:00 and 18:00.  Cosmetic only.
        second_angle: Degrees clockwise from 12 o'clock.
        minute_angle: Degrees clockwise from 12 o'clock.
        hour_angle:   Degrees clockwise from 12 o'clock.
    """

    hour24: int
    minute: int
    second: int
    subsecond: float
    hour12: int
    is_daytime: bool
    second_angle: float
    minute_angle: float
    hour_angle: float

    @property
    def digital(self) -> str:
        """``HH:MM`` with zero padding.  Seconds are deliberately dropped."""
        return f"{self.hour24:02d}:{self.minute:02d}"


def project(reference: datetime, offset_hours: float) -> ProjectedTime:
    """Project *reference* by *offset_hours* and decompose the result.

    The offset is applied arithmetically on microseconds since the epoch,
    and the decomposition uses a zero-offset day, so no zone shift happens
    twice.  A naive *reference* is read as UTC.  Out-of-range offsets wrap
    around the day instead of failing.
    """
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=UTC)

    elapsed_us = (reference - _EPOCH) // _US_TICK
    shifted_us = elapsed_us + round(offset_hours * _US_PER_HOUR)
    day_us = shifted_us % _US_PER_DAY

    hour24, rest = divmod(day_us, _US_PER_HOUR)
    minute, rest = divmod(rest, _US_PER_MINUTE)
    second, micros = divmod(rest, _US_PER_SECOND)
    subsecond = micros / _US_PER_SECOND
    hour12 = hour24 % 12

    fractional_seconds = second + subsecond
    fractional_minutes = minute + fractional_seconds / 60

    return ProjectedTime(
        hour24=hour24,
        minute=minute,
        second=second,
        subsecond=subsecond,
        hour12=hour12,
        is_daytime=DAY_START_HOUR <= hour24 < NIGHT_START_HOUR,
        second_angle=fractional_seconds * 6,
        minute_angle=fractional_minutes * 6,
        hour_angle=(hour12 + fractional_minutes / 60) * 30,
    )


class TimeProjector:
    """Projects the current instant of an injected clock.

    Parameters:
        clock: Time source.  Defaults to :class:`SystemClock`.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or SystemClock()

    @property
    def clock(self) -> Clock:
        return self._clock

    def now(self, offset_hours: float) -> ProjectedTime:
        """Project the clock's current instant by *offset_hours*."""
        return project(self._clock.now(), offset_hours)

    @staticmethod
    def project(reference: datetime, offset_hours: float) -> ProjectedTime:
        return project(reference, offset_hours)
