"""UTC offset labels."""

from __future__ import annotations


def format_offset(offset_hours: float) -> str:
    """Render *offset_hours* as a signed ``H:MM`` label, e.g. ``"+1:30"``.

    Only a fractional part of exactly ``0.5`` becomes ``:30``.  Anything
    else, quarter hours included, is shown as ``:00``.

    *offset_hours* must be finite: NaN raises ``ValueError`` and an
    infinity raises ``OverflowError``.
    """
    abs_offset = abs(offset_hours)
    hours = int(abs_offset)
    minute_value = 30 if abs_offset - hours == 0.5 else 0
    sign = "-" if offset_hours < 0 else "+"
    return f"{sign}{hours}:{minute_value:02d}"
