"""
Shared fixtures and helpers for the ephemeris and terminator tests.

Reference instants are the 2024 equinoxes, solstices, and lunar phases
published by the US Naval Observatory.
"""

import math
from datetime import datetime, timezone

import pytest


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


MARCH_EQUINOX = utc(2024, 3, 20, 3, 6)
SEPTEMBER_EQUINOX = utc(2024, 9, 22, 12, 44)
JUNE_SOLSTICE = utc(2024, 6, 20, 20, 51)
DECEMBER_SOLSTICE = utc(2024, 12, 21, 9, 20)

# Total solar eclipse, greatest eclipse over Mexico
NEW_MOON_ECLIPSE = utc(2024, 4, 8, 18, 18)
FULL_MOON = utc(2024, 4, 23, 23, 49)
FIRST_QUARTER = utc(2024, 4, 15, 19, 13)
LAST_QUARTER = utc(2024, 5, 1, 11, 27)


def angle_diff(a: float, b: float) -> float:
    """Signed smallest difference a - b in degrees, in [-180, 180)."""
    return (a - b + 180.0) % 360.0 - 180.0


def central_angle(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in degrees (vector form, stable near 0° and 180°)."""
    p1, l1, p2, l2 = map(math.radians, (lat1, lng1, lat2, lng2))
    a = (math.cos(p1) * math.cos(l1), math.cos(p1) * math.sin(l1), math.sin(p1))
    b = (math.cos(p2) * math.cos(l2), math.cos(p2) * math.sin(l2), math.sin(p2))
    cross = (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )
    dot = sum(x * y for x, y in zip(a, b))
    return math.degrees(math.atan2(math.sqrt(sum(c * c for c in cross)), dot))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host settings out of every test."""
    for name in ("DAYNIGHT_SEGMENTS", "DAYNIGHT_LANG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
