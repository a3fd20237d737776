#Purpose: Cut-list geofencing logic.
#Decides which canvass points fall inside a hand-drawn boundary polygon.
#Typical responsibilities:
#Given a boundary (>= 3 vertices) + candidate points -> keep the ones inside
#Exclude unlocated points (missing coords or the 0,0 sentinel) no matter the shape
#Keep the caller's order and payload untouched
#Output: the order-preserving subset of points inside the boundary.

from __future__ import annotations

from typing import Any, List, Sequence

from routing.geo import GeoPoint, as_geopoint, location_of

# a boundary needs at least a triangle to enclose anything
MIN_BOUNDARY_VERTICES = 3


def point_in_polygon(point: GeoPoint, boundary: Sequence[Any]) -> bool:
    """
    Even-odd ray casting test for a single point.

    Axis convention: longitude is the vertical test axis and latitude the
    horizontal one. Only consistency matters here, not geography.

    Points lying exactly on an edge get whatever the arithmetic gives them;
    there is no special case for them.

    Args:
        point: GeoPoint to classify
        boundary: open polygon (no closing duplicate), GeoPoints or (lat, lng) pairs

    Returns:
        True when the point is inside, False otherwise (or for < 3 vertices).
    """
    vertices = [as_geopoint(v) for v in boundary]
    if len(vertices) < MIN_BOUNDARY_VERTICES:
        return False
    return _ray_cast(point, vertices)


def _ray_cast(point: GeoPoint, vertices: List[GeoPoint]) -> bool:
    inside = False
    j = len(vertices) - 1 #previous vertex, wraps to the last one for the closing edge
    for i, vi in enumerate(vertices):
        vj = vertices[j]
        if (vi.longitude > point.longitude) != (vj.longitude > point.longitude):
            crossing_lat = (
                (vj.latitude - vi.latitude) * (point.longitude - vi.longitude) / (vj.longitude - vi.longitude)
                + vi.latitude
            )
            if point.latitude < crossing_lat:
                inside = not inside
        j = i

    return inside


def points_in_boundary(points: Sequence[Any], boundary: Sequence[Any]) -> List[Any]:
    """
    Select the points that fall inside a cut-list boundary.

    Args:
        points: objects with nullable .latitude / .longitude (voters, stops, ...)
        boundary: ordered polygon vertices, closure implicit

    Returns:
        List of the input objects inside the boundary, in input order.
        Empty when the boundary cannot form a region (mid-drawing states).
    """
    #degenerate boundary: nothing selected, not an error
    if len(boundary) < MIN_BOUNDARY_VERTICES:
        return []

    vertices = [as_geopoint(v) for v in boundary]

    selected: List[Any] = []
    for point in points:
        location = location_of(point)
        #unlocated points never belong to a region
        if location is None:
            continue
        if _ray_cast(location, vertices):
            selected.append(point)

    return selected
