"""Low-precision lunar ephemeris: sub-lunar point and phase.

Uses the leading terms of the standard lunar series. Positions are good
to a few hundredths of a degree near the present epoch, which is far
below what a world map can show.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from daynightmap.julian import (
    greenwich_mean_sidereal_time,
    julian_century,
    normalize_degrees,
    normalize_longitude,
    to_julian_date,
)
from daynightmap.models import GeoPoint, MoonPhase
from daynightmap.solar import mean_obliquity

# (amplitude°, D, M, Ms, F) multipliers of each periodic term
_LONGITUDE_TERMS: tuple[tuple[float, int, int, int, int], ...] = (
    (6.289, 0, 1, 0, 0),
    (1.274, 2, -1, 0, 0),
    (0.658, 2, 0, 0, 0),
    (0.214, 0, 2, 0, 0),
    (-0.186, 0, 0, 1, 0),
    (-0.114, 0, 0, 0, 2),
)

_LATITUDE_TERMS: tuple[tuple[float, int, int, int, int], ...] = (
    (5.128, 0, 0, 0, 1),
    (0.281, 0, 1, 0, 1),
    (0.278, 0, 1, 0, -1),
    (0.173, 2, 0, 0, -1),
)

# Corrections taking the mean elongation to the true sun-moon elongation
_PHASE_TERMS: tuple[tuple[float, int, int, int, int], ...] = (
    (6.289, 0, 1, 0, 0),
    (-2.100, 0, 0, 1, 0),
    (1.274, 2, -1, 0, 0),
    (0.658, 2, 0, 0, 0),
    (0.214, 0, 2, 0, 0),
    (0.110, 1, 0, 0, 0),
)

PHASE_NAMES = (
    "new_moon",
    "waxing_crescent",
    "first_quarter",
    "waxing_gibbous",
    "full_moon",
    "waning_gibbous",
    "last_quarter",
    "waning_crescent",
)


@dataclass(frozen=True)
class _MeanElements:
    """Lunar and solar mean elements (degrees, [0, 360))."""

    L: float  # Moon's mean longitude
    M: float  # Moon's mean anomaly
    D: float  # Mean elongation
    F: float  # Argument of latitude
    Ms: float  # Sun's mean anomaly

    def series(self, terms: tuple[tuple[float, int, int, int, int], ...]) -> float:
        total = 0.0
        for amplitude, d, m, ms, f in terms:
            arg = d * self.D + m * self.M + ms * self.Ms + f * self.F
            total += amplitude * math.sin(math.radians(arg))
        return total


def _mean_elements(T: float) -> _MeanElements:
    return _MeanElements(
        L=normalize_degrees(218.3165 + 481267.8813 * T),
        M=normalize_degrees(134.9634 + 477198.8676 * T),
        D=normalize_degrees(297.8502 + 445267.1115 * T),
        F=normalize_degrees(93.2720 + 483202.0175 * T),
        Ms=normalize_degrees(357.5291 + 35999.0503 * T),
    )


def ecliptic_position(T: float) -> tuple[float, float]:
    """Geocentric ecliptic (longitude, latitude) of the moon in degrees."""
    el = _mean_elements(T)
    return normalize_degrees(el.L + el.series(_LONGITUDE_TERMS)), el.series(_LATITUDE_TERMS)


def equatorial_position(T: float) -> tuple[float, float]:
    """Geocentric (right ascension [0, 360), declination) of the moon in degrees."""
    lam, beta = (math.radians(a) for a in ecliptic_position(T))
    eps = math.radians(mean_obliquity(T))

    sin_dec = math.sin(beta) * math.cos(eps) + math.cos(beta) * math.sin(eps) * math.sin(lam)
    dec = math.asin(sin_dec)
    ra = math.atan2(
        math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps),
        math.cos(lam),
    )
    return normalize_degrees(math.degrees(ra)), math.degrees(dec)


def sub_lunar_point(instant: datetime) -> GeoPoint:
    """The point on Earth directly beneath the moon."""
    jd = to_julian_date(instant)
    ra, dec = equatorial_position(julian_century(jd))
    lng = normalize_longitude(ra - greenwich_mean_sidereal_time(jd))
    return GeoPoint(lat=dec, lng=lng)


def moon_phase(instant: datetime) -> MoonPhase:
    """Illuminated fraction and cycle position of the moon.

    The phase angle is the moon's mean elongation from the sun plus the
    largest periodic terms of the moon's and sun's equations of centre;
    fraction follows (1 - cos φ) / 2.
    """
    el = _mean_elements(julian_century(to_julian_date(instant)))
    phase_angle = math.radians(el.D + el.series(_PHASE_TERMS))

    fraction = (1.0 - math.cos(phase_angle)) / 2.0
    cycle = phase_angle % (2 * math.pi)
    phase = cycle / (2 * math.pi)
    # Rounding can land exactly on 2π
    if phase >= 1.0:
        phase = 0.0
    return MoonPhase(fraction=fraction, phase=phase)


def phase_name(phase: float) -> str:
    """Conventional name key for a cycle position; each covers one eighth centred on k/8."""
    index = int(math.floor(phase * 8 + 0.5)) % 8
    return PHASE_NAMES[index]
