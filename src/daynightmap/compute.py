"""Computation layer — query parsing, per-instant snapshots, and time-lapse sequences."""

import logging
from collections.abc import Iterator
from datetime import datetime, timedelta

from pytz import UnknownTimeZoneError, timezone, utc
from pytz.exceptions import InvalidTimeError

from daynightmap.config import default_lang, default_segments
from daynightmap.i18n import t
from daynightmap.julian import to_julian_date, to_utc
from daynightmap.lunar import moon_phase, phase_name, sub_lunar_point
from daynightmap.models import DayNightData, QueryInput, Ring
from daynightmap.solar import antipode, equation_of_time, sub_solar_point
from daynightmap.terminator import NIGHT_RADIUS, TwilightBand, geodesic_circle, to_geojson
from daynightmap.zones import time_at_offset, utc_offset_meridians

log = logging.getLogger(__name__)

_WHEN_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S")

MIN_SPEED = 1.0
MAX_SPEED = 86400.0  # one day per second


class QueryError(Exception):
    """User-supplied time or timezone could not be interpreted."""


def parse_when(when: str, tz: str = "UTC") -> datetime:
    """Resolve a local time string in an IANA zone to a UTC datetime.

    Args:
        when: Local time string in "YYYY-MM-DD HH:MM" (or with ":SS") format.
        tz: IANA timezone name. Defaults to UTC.

    Returns:
        Aware datetime in UTC.

    Raises:
        QueryError: On a malformed string, an unknown zone, or a local time
            that is skipped or repeated by a DST transition.
    """
    dt = None
    for fmt in _WHEN_FORMATS:
        try:
            dt = datetime.strptime(when.strip(), fmt)
            break
        except ValueError:
            continue
    if dt is None:
        raise QueryError(f"Unrecognised time: {when!r} (expected YYYY-MM-DD HH:MM)")

    try:
        local_tz = timezone(tz)
    except UnknownTimeZoneError:
        raise QueryError(f"Unknown timezone: {tz}") from None

    try:
        return local_tz.localize(dt, is_dst=None).astimezone(utc)
    except InvalidTimeError as e:
        raise QueryError(f"Local time {when} is ambiguous or skipped in {tz}") from e


def compute_day_night(instant: datetime, segments: int | None = None) -> DayNightData:
    """Compute every sun/moon output for one instant.

    Args:
        instant: Any datetime; naive values are taken as UTC.
        segments: Ring vertex count. Defaults to DAYNIGHT_SEGMENTS.

    Returns:
        DayNightData with sub-points, moon phase, night and twilight rings.
    """
    if segments is None:
        segments = default_segments()
    utc_dt = to_utc(instant)

    sun = sub_solar_point(utc_dt)
    anti = antipode(sun)
    twilight: dict[str, Ring] = {
        band.value: geodesic_circle(anti, band.radius, segments) for band in TwilightBand
    }

    return DayNightData(
        utc_dt=utc_dt,
        julian_date=to_julian_date(utc_dt),
        sun=sun,
        moon=sub_lunar_point(utc_dt),
        moon_phase=moon_phase(utc_dt),
        solar_declination=sun.lat,
        equation_of_time=equation_of_time(utc_dt),
        night=geodesic_circle(anti, NIGHT_RADIUS, segments),
        twilight=twilight,
    )


def timelapse(
    start: datetime,
    speed: float,
    frames: int,
    fps: float = 30.0,
    segments: int | None = None,
) -> Iterator[DayNightData]:
    """Yield snapshots for a virtual clock running `speed` times faster than real time.

    Frame k is `k * speed / fps` seconds after `start`. Speed is clamped
    to [1, 86400].

    Raises:
        ValueError: If fps is not positive.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    clamped = max(MIN_SPEED, min(MAX_SPEED, speed))
    if clamped != speed:
        log.debug("Time-lapse speed %s clamped to %s", speed, clamped)
    step = timedelta(seconds=clamped / fps)
    start = to_utc(start)
    log.debug("Time-lapse: %d frames from %s, %s per frame", frames, start.isoformat(), step)
    for k in range(frames):
        yield compute_day_night(start + k * step, segments)


def snapshot_to_dict(data: DayNightData, lang: str | None = None) -> dict:
    """JSON-ready view of a snapshot. Regions are GeoJSON Polygon geometries."""
    if lang is None:
        lang = default_lang()
    phase_key = phase_name(data.moon_phase.phase)
    return {
        "utc": data.utc_dt.isoformat(),
        "julian_date": data.julian_date,
        "sun": {"label": t("sun", lang), "lat": data.sun.lat, "lng": data.sun.lng},
        "moon": {
            "label": t("moon", lang),
            "lat": data.moon.lat,
            "lng": data.moon.lng,
            "fraction": data.moon_phase.fraction,
            "phase": data.moon_phase.phase,
            "phase_name": t(phase_key, lang),
        },
        "solar_declination": data.solar_declination,
        "equation_of_time": data.equation_of_time,
        "regions": [
            {"name": t("night", lang), "band": "night", "geometry": to_geojson(data.night)},
            *(
                {"name": t(band, lang), "band": band, "geometry": to_geojson(ring)}
                for band, ring in data.twilight.items()
            ),
        ],
        "zones": [
            {
                "label": z.label,
                "lng": z.lng,
                "time": time_at_offset(data.utc_dt, z.offset),
            }
            for z in utc_offset_meridians()
        ],
    }


def run(query: QueryInput, segments: int | None = None) -> DayNightData:
    """Top-level entry point: takes a QueryInput and returns a DayNightData.

    Args:
        query: User input (time string, timezone name).
        segments: Ring vertex count. Defaults to DAYNIGHT_SEGMENTS.

    Returns:
        Fully computed DayNightData.
    """
    utc_dt = parse_when(query.when, query.tz)
    log.info("Computing day/night state for %s (%s %s)", utc_dt.isoformat(), query.when, query.tz)
    return compute_day_night(utc_dt, segments)
