"""Whole-hour UTC offsets and their central meridians."""

from datetime import datetime, timedelta

from daynightmap.julian import to_utc
from daynightmap.models import OffsetMeridian

DEGREES_PER_HOUR = 15.0


def _label(offset: int) -> str:
    if offset == 0:
        return "UTC"
    return f"UTC{offset:+d}"


def utc_offset_meridians() -> tuple[OffsetMeridian, ...]:
    """The 25 standard offsets UTC-12 … UTC+12, west to east."""
    return tuple(
        OffsetMeridian(offset=h, lng=h * DEGREES_PER_HOUR, label=_label(h))
        for h in range(-12, 13)
    )


def time_at_offset(instant: datetime, offset_hours: float) -> str:
    """Wall-clock "HH:MM" at a fixed offset from UTC."""
    local = to_utc(instant) + timedelta(hours=offset_hours)
    return local.strftime("%H:%M")
