#Purpose: Hand-off from a sequenced route to an external map app.
#Sole responsibility: turn located stops into map bounds and a walking-directions URL.
#Encapsulates the map-provider specifics:
#coordinate formatting (lat,lng joined by '|')
#URL construction (Google Maps dir/?api=1)
#the provider's waypoint cap
#It should not reorder stops or compute metrics.

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from routing.geo import GeoPoint, location_of

GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/"

# Google Maps refuses more waypoints than this
MAX_WAYPOINTS = 25

# Phoenix, AZ: where the dashboard centres an empty map
DEFAULT_CENTER = GeoPoint(33.4484, -112.074)


def _located(route: Sequence[Any]) -> List[GeoPoint]:
    return [location for location in (location_of(stop) for stop in route) if location is not None]


def format_coordinates(locations: Sequence[GeoPoint]) -> str:
    """Convert GeoPoints to 'lat,lng|lat,lng|...'"""
    return "|".join(f"{p.latitude},{p.longitude}" for p in locations)


def route_bounds(route: Sequence[Any], default: GeoPoint = DEFAULT_CENTER) -> Tuple[GeoPoint, GeoPoint]:
    """
    (south_west, north_east) corners around the located stops of a route.
    Falls back to `default` for both corners when nothing is located.
    """
    locations = _located(route)
    if not locations:
        return default, default

    latitudes = [p.latitude for p in locations]
    longitudes = [p.longitude for p in locations]
    return (
        GeoPoint(min(latitudes), min(longitudes)),
        GeoPoint(max(latitudes), max(longitudes)),
    )


def walking_directions_url(route: Sequence[Any], max_waypoints: int = MAX_WAYPOINTS) -> str:
    """
    Google Maps walking directions through the route's located stops.

    origin = first located stop, destination = last located stop,
    waypoints = the first `max_waypoints` located stops.

    Returns "" when no stop is located.
    """
    locations = _located(route)
    if not locations:
        return ""

    origin = format_coordinates(locations[:1])
    destination = format_coordinates(locations[-1:])
    waypoints = format_coordinates(locations[:max_waypoints])

    return (
        f"{GOOGLE_MAPS_DIRECTIONS_URL}?api=1"
        f"&origin={origin}"
        f"&destination={destination}"
        f"&waypoints={waypoints}"
        f"&travelmode=walking"
    )
