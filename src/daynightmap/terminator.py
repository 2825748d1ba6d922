"""Terminator geometry — night and twilight regions as closed geographic rings.

Every region is a spherical cap around the anti-solar point: the night
side at 90° and the twilight boundaries at 90° plus the sun's depression
angle. Rings are plain lat/lng; longitudes jump by nearly 360° where a
ring crosses the antimeridian, and screen-space replication is left to
the renderer.
"""

from datetime import datetime
from enum import Enum

import numpy as np

from daynightmap.config import default_segments
from daynightmap.models import GeoPoint, Ring
from daynightmap.solar import antipode, sub_solar_point

NIGHT_RADIUS = 90.0


class TwilightBand(str, Enum):
    """Twilight boundary named by the sun's depression below the horizon."""

    CIVIL = "civil"  # 6°
    NAUTICAL = "nautical"  # 12°
    ASTRONOMICAL = "astronomical"  # 18°

    @property
    def radius(self) -> float:
        return _TWILIGHT_RADIUS[self]


_TWILIGHT_RADIUS: dict[TwilightBand, float] = {
    TwilightBand.CIVIL: 96.0,
    TwilightBand.NAUTICAL: 102.0,
    TwilightBand.ASTRONOMICAL: 108.0,
}


def geodesic_circle(center: GeoPoint, radius: float, segments: int | None = None) -> Ring:
    """Sample the circle of great-circle radius `radius` degrees around `center`.

    Solves the direct geodesic problem at `segments` equally spaced
    bearings (clockwise from north) and closes the ring by repeating the
    first vertex. Valid for any radius in [0, 180], including caps that
    contain a pole.

    Args:
        center: Centre of the cap.
        radius: Angular radius in degrees.
        segments: Number of distinct vertices. Defaults to DAYNIGHT_SEGMENTS.

    Returns:
        Closed ring of segments + 1 GeoPoints.
    """
    if segments is None:
        segments = default_segments()
    assert 0.0 <= radius <= 180.0, f"radius out of range: {radius}"
    assert segments >= 3, f"too few segments: {segments}"

    lat_c = np.radians(center.lat)
    r = np.radians(radius)
    bearings = np.linspace(0.0, 2 * np.pi, segments, endpoint=False)

    sin_lat = np.sin(lat_c) * np.cos(r) + np.cos(lat_c) * np.sin(r) * np.cos(bearings)
    lats = np.arcsin(np.clip(sin_lat, -1.0, 1.0))
    dlng = np.arctan2(
        np.sin(bearings) * np.sin(r) * np.cos(lat_c),
        np.cos(r) - np.sin(lat_c) * np.sin(lats),
    )
    lngs = center.lng + np.degrees(dlng)
    # Vectorised (-180, 180] reduction
    lngs = 180.0 - np.mod(180.0 - lngs, 360.0)

    points = [GeoPoint(lat=float(la), lng=float(lo)) for la, lo in zip(np.degrees(lats), lngs)]
    points.append(points[0])
    return tuple(points)


def night_polygon(instant: datetime, segments: int | None = None) -> Ring:
    """The night hemisphere: a 90° cap around the anti-solar point."""
    return geodesic_circle(antipode(sub_solar_point(instant)), NIGHT_RADIUS, segments)


def twilight_polygon(
    instant: datetime, band: TwilightBand | str, segments: int | None = None
) -> Ring:
    """Everything darker than the given twilight boundary's outer edge.

    Raises:
        ValueError: If band is not a known twilight name.
    """
    band = TwilightBand(band)
    return geodesic_circle(antipode(sub_solar_point(instant)), band.radius, segments)


def to_geojson(ring: Ring) -> dict:
    """GeoJSON Polygon geometry with `ring` as its single outer ring."""
    return {"type": "Polygon", "coordinates": [[p.as_lnglat() for p in ring]]}


def get_night_geojson(instant: datetime, segments: int | None = None) -> dict:
    return to_geojson(night_polygon(instant, segments))


def get_twilight_geojson(
    instant: datetime, band: TwilightBand | str, segments: int | None = None
) -> dict:
    return to_geojson(twilight_polygon(instant, band, segments))
