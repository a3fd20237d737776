#Purpose: Walk-order computation for door-to-door canvassing.
#Returns the visiting order a canvasser should follow from a start point.
#Greedy nearest-neighbour over haversine distance: no backtracking, no optimality promise.
#Unlocated points are carried to the end so the caller can still show them ("needs geocoding").
#Cost is O(n^2) in located points; fine for a cut list (hundreds of stops).
#Callers with tens of thousands of points should split them by cut list first.

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from routing.geo import GeoPoint, as_geopoint, distance, location_of


def partition_located(points: Sequence[Any]) -> Tuple[List[Tuple[Any, GeoPoint]], List[Any]]:
    """
    Split points into (located, unlocated), keeping relative order in both.

    Located entries are (point, GeoPoint) pairs so the location is resolved once.
    """
    located: List[Tuple[Any, GeoPoint]] = []
    unlocated: List[Any] = []

    for point in points:
        location = location_of(point)
        if location is None:
            unlocated.append(point)
        else:
            located.append((point, location))

    return located, unlocated


def sequence(points: Sequence[Any], start: Any) -> List[Any]:
    """
    Order points into a walking route using the nearest-neighbour heuristic.

    Args:
        points: objects with nullable .latitude / .longitude; payload is never read
        start: GeoPoint (or (lat, lng)) where the canvasser begins

    Returns:
        New list: a permutation of `points`. Located points in visiting order,
        then unlocated points in their original relative order.

    Deterministic: ties go to the first point reaching the minimum distance
    in the remaining list's current order.
    """
    located, unlocated = partition_located(points)

    #0 or 1 located points are already in order
    if len(located) <= 1:
        return [point for point, _ in located] + unlocated

    remaining = list(located)
    result: List[Any] = []
    current = as_geopoint(start)

    while remaining:
        nearest_index = 0
        nearest_distance = float("inf")

        for index, (_, location) in enumerate(remaining):
            d = distance(current, location)
            #strict < keeps the first point on ties
            if d < nearest_distance:
                nearest_distance = d
                nearest_index = index

        point, location = remaining.pop(nearest_index)
        result.append(point)
        current = location

    return result + unlocated
