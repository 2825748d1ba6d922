"""Low-precision solar ephemeris and the sub-solar point.

Accurate to roughly 0.01° in declination for dates within a few
centuries of J2000.0. Trig is evaluated in radians; every public value
is in degrees except the equation of time, which is in minutes.
"""

import math
from datetime import datetime

from daynightmap.julian import (
    julian_century,
    normalize_degrees,
    normalize_longitude,
    to_julian_date,
    utc_hours,
)
from daynightmap.models import GeoPoint

MINUTES_PER_DEGREE = 4.0  # 1440 minutes / 360°


def _mean_longitude(T: float) -> float:
    """Geometric mean longitude of the sun, L0."""
    return normalize_degrees(280.46646 + T * (36000.76983 + T * 0.0003032))


def _mean_anomaly(T: float) -> float:
    """Mean anomaly of the sun, M."""
    return normalize_degrees(357.52911 + T * (35999.05029 - T * 0.0001537))


def _eccentricity(T: float) -> float:
    """Eccentricity of Earth's orbit."""
    return 0.016708634 - T * (0.000042037 + T * 0.0000001267)


def mean_obliquity(T: float) -> float:
    """Mean obliquity of the ecliptic, ε (degrees)."""
    return 23.439291 - T * 0.0130042


def _true_longitude(T: float) -> float:
    """Sun's true ecliptic longitude λ = L0 + C."""
    m = math.radians(_mean_anomaly(T))
    center = (
        (1.914602 - T * (0.004817 + T * 0.000014)) * math.sin(m)
        + (0.019993 - T * 0.000101) * math.sin(2 * m)
        + 0.000289 * math.sin(3 * m)
    )
    return _mean_longitude(T) + center


def solar_declination(instant: datetime) -> float:
    """Solar declination in degrees. Always bounded by the obliquity."""
    T = julian_century(to_julian_date(instant))
    obliquity = math.radians(mean_obliquity(T))
    lam = math.radians(_true_longitude(T))
    return math.degrees(math.asin(math.sin(obliquity) * math.sin(lam)))


def equation_of_time(instant: datetime) -> float:
    """Equation of time in minutes. Positive means the sundial is ahead of the clock."""
    T = julian_century(to_julian_date(instant))
    l0 = math.radians(_mean_longitude(T))
    m = math.radians(_mean_anomaly(T))
    e = _eccentricity(T)
    y = math.tan(math.radians(mean_obliquity(T)) / 2) ** 2

    eot = (
        y * math.sin(2 * l0)
        - 2 * e * math.sin(m)
        + 4 * e * y * math.sin(m) * math.cos(2 * l0)
        - 0.5 * y * y * math.sin(4 * l0)
        - 1.25 * e * e * math.sin(2 * m)
    )
    return math.degrees(eot) * MINUTES_PER_DEGREE


def solar_right_ascension(instant: datetime) -> float:
    """Right ascension of the sun (mean equinox of date) in degrees, [0, 360)."""
    T = julian_century(to_julian_date(instant))
    obliquity = math.radians(mean_obliquity(T))
    lam = math.radians(_true_longitude(T))
    ra = math.atan2(math.cos(obliquity) * math.sin(lam), math.cos(lam))
    return normalize_degrees(math.degrees(ra))


def sub_solar_point(instant: datetime) -> GeoPoint:
    """The point on Earth directly beneath the sun.

    The mean sun is over Greenwich at 12:00 UTC and moves 15° west per
    hour. The true sun runs EoT minutes ahead of it, i.e. EoT / 4 degrees
    further west, so the correction is subtracted from the mean longitude.
    """
    hour_angle = (utc_hours(instant) - 12.0) * 15.0
    lng = -hour_angle - equation_of_time(instant) / MINUTES_PER_DEGREE
    return GeoPoint(lat=solar_declination(instant), lng=normalize_longitude(lng))


def antipode(point: GeoPoint) -> GeoPoint:
    """Point diametrically opposite on the sphere."""
    lng = point.lng - 180.0 if point.lng > 0 else point.lng + 180.0
    return GeoPoint(lat=-point.lat, lng=normalize_longitude(lng))
