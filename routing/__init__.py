#Marks routing as a package.
#Re-exports the public route-planning API (distance, points_in_boundary,
#sequence, total_distance, ...) so other modules import from routing without knowing internal file names.
#No business logic.

from .geo import EARTH_RADIUS_M, GeoPoint, distance, locate, location_of
from .geofence import point_in_polygon, points_in_boundary
from .route_service import partition_located, sequence
from .eta_service import estimated_minutes, total_distance
from .formatting import format_distance, format_duration
from .directions import route_bounds, walking_directions_url

__all__ = [
    "EARTH_RADIUS_M",
    "GeoPoint",
    "distance",
    "locate",
    "location_of",
    "point_in_polygon",
    "points_in_boundary",
    "partition_located",
    "sequence",
    "total_distance",
    "estimated_minutes",
    "format_distance",
    "format_duration",
    "route_bounds",
    "walking_directions_url",
]
