"""Time conversion — instants to Julian Date, Julian Century, and sidereal time."""

from datetime import datetime, timezone

JULIAN_EPOCH_UNIX = 2440587.5  # JD at 1970-01-01T00:00Z
JULIAN_EPOCH_J2000 = 2451545.0  # JD at 2000-01-01T12:00Z
DAYS_PER_CENTURY = 36525.0
MILLIS_PER_DAY = 86400000.0


def to_utc(instant: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def to_julian_date(instant: datetime) -> float:
    """Julian Date of an instant."""
    millis = to_utc(instant).timestamp() * 1000.0
    return millis / MILLIS_PER_DAY + JULIAN_EPOCH_UNIX


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - JULIAN_EPOCH_J2000) / DAYS_PER_CENTURY


def normalize_degrees(angle: float) -> float:
    """Reduce an angle into [0, 360)."""
    angle %= 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if angle == 360.0 else angle


def normalize_longitude(lng: float) -> float:
    """Reduce a longitude into (-180, 180].

    A single modulo step does the work of repeated ±360 adjustment, so
    the reduction terminates for any finite input.
    """
    if -180.0 < lng <= 180.0:
        return lng
    lng = normalize_degrees(lng)
    if lng > 180.0:
        lng -= 360.0
    return lng


def greenwich_mean_sidereal_time(jd: float) -> float:
    """GMST in degrees, [0, 360)."""
    return normalize_degrees(280.46061837 + 360.98564736629 * (jd - JULIAN_EPOCH_J2000))


def utc_hours(instant: datetime) -> float:
    """Fractional hours elapsed since UTC midnight."""
    dt = to_utc(instant)
    return dt.hour + dt.minute / 60.0 + (dt.second + dt.microsecond / 1e6) / 3600.0
