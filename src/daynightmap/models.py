"""Data model definitions — explicit boundaries between input, ephemeris, and geometry layers."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    when: str  # "YYYY-MM-DD HH:MM" format string, local to tz
    tz: str = "UTC"  # IANA timezone name ("Asia/Seoul")


@dataclass(frozen=True)
class GeoPoint:
    """A point on the Earth's surface. lng is always within (-180, 180]."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)

    def as_lnglat(self) -> list[float]:
        """GeoJSON position order."""
        return [self.lng, self.lat]


# Closed linear ring: first vertex == last vertex
Ring = tuple[GeoPoint, ...]


@dataclass(frozen=True)
class MoonPhase:
    """Illuminated disc fraction and position within the synodic cycle."""

    fraction: float  # 0 = dark, 1 = fully lit
    phase: float  # 0 = new, 0.25 = first quarter, 0.5 = full, 0.75 = last quarter


@dataclass(frozen=True)
class OffsetMeridian:
    """A whole-hour UTC offset and the meridian it is centred on."""

    offset: int  # Hours east of UTC
    lng: float  # Central meridian (degrees)
    label: str  # "UTC", "UTC+9", "UTC-5"


@dataclass(frozen=True)
class DayNightData:
    """The sole output consumed by renderers. Fully computed state for one instant."""

    utc_dt: datetime  # UTC datetime (with tzinfo=utc)
    julian_date: float
    sun: GeoPoint  # Sub-solar point
    moon: GeoPoint  # Sub-lunar point
    moon_phase: MoonPhase
    solar_declination: float  # Degrees
    equation_of_time: float  # Minutes, positive = sundial ahead of clock
    night: Ring  # 90° cap around the anti-solar point
    twilight: Mapping[str, Ring] = field(default_factory=dict)  # band name → ring

    def __post_init__(self):
        # Read-only view so the snapshot stays immutable
        object.__setattr__(self, "twilight", MappingProxyType(dict(self.twilight)))
