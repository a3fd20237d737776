"""
Purpose: Shared geographic primitives for every routing module.
What it does:
- Defines the GeoPoint value type (WGS-84 degrees)
- Decides whether a raw (lat, lng) pair is a real location or the "never geocoded" sentinel
- Computes haversine great-circle distance in meters

Rule: No I/O, no logging, no domain fields. Geometry only.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

LatLng = Tuple[float, float]

# fixed sphere approximation, no ellipsoidal correction
EARTH_RADIUS_M = 6371000.0


@dataclass(frozen=True)
class GeoPoint:
    """
    A location in WGS-84 degrees.
    """
    latitude: float
    longitude: float

    def as_tuple(self) -> LatLng:
        return (self.latitude, self.longitude)


def _is_missing(value: Any) -> bool:
    # NaN comes through from pandas for empty cells
    return value is None or (isinstance(value, float) and math.isnan(value))


def locate(latitude: Optional[float], longitude: Optional[float]) -> Optional[GeoPoint]:
    """
    Turn a nullable (lat, lng) pair into a GeoPoint, or None when unlocated.

    Unlocated means either coordinate is missing, or the pair is exactly (0, 0)
    which upstream uses as the default for addresses that were never geocoded.
    """
    if _is_missing(latitude) or _is_missing(longitude):
        return None
    latitude = float(latitude)
    longitude = float(longitude)
    if latitude == 0 and longitude == 0:
        return None
    return GeoPoint(latitude, longitude)


def location_of(point: Any) -> Optional[GeoPoint]:
    """
    Location of any routable object exposing .latitude and .longitude.
    A bare GeoPoint is accepted too and goes through the same sentinel rule.
    """
    return locate(getattr(point, "latitude", None), getattr(point, "longitude", None))


def as_geopoint(value: Any) -> GeoPoint:
    """
    Accept a GeoPoint, a (lat, lng) tuple or a {"lat", "lng"} mapping.
    """
    if isinstance(value, GeoPoint):
        return value
    if isinstance(value, dict):
        return GeoPoint(float(value["lat"]), float(value["lng"]))
    lat, lng = value
    return GeoPoint(float(lat), float(lng))


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """
    Haversine great-circle distance in meters between two points.

    Symmetric, never negative, exactly 0.0 for identical points.
    """
    d_lat = math.radians(b.latitude - a.latitude)
    d_lng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude)) * math.cos(math.radians(b.latitude)) * math.sin(d_lng / 2) ** 2
    )
    # rounding can push h a hair outside [0, 1]
    h = min(1.0, max(0.0, h))

    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(h), math.sqrt(1 - h))
