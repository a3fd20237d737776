from dataclasses import dataclass
from typing import Optional

import pytest

from routing.geo import GeoPoint
from routing.geofence import point_in_polygon, points_in_boundary


@dataclass
class Stop:
    id: str
    latitude: Optional[float]
    longitude: Optional[float]


@pytest.fixture
def square():
    return [(0, 0), (0, 10), (10, 10), (10, 0)]


def test_square_inside_and_outside(square):
    inside = Stop("inside", 5, 5)
    outside = Stop("outside", 20, 20)

    selected = points_in_boundary([inside, outside], square)

    assert selected == [inside]


def test_sentinel_vertex_is_excluded(square):
    """
    (0, 0) is a vertex of the square, but it is also the "never geocoded" sentinel.
    """
    sentinel = Stop("sentinel", 0, 0)

    assert points_in_boundary([sentinel], square) == []


def test_missing_coordinates_are_excluded(square):
    stops = [Stop("no_lat", None, 5), Stop("no_lng", 5, None), Stop("ok", 2, 3)]

    selected = points_in_boundary(stops, square)

    assert [s.id for s in selected] == ["ok"]


def test_degenerate_boundary_selects_nothing():
    stops = [Stop("a", 5, 5), Stop("b", 0.5, 0.5)]

    assert points_in_boundary(stops, [(0, 0), (10, 10)]) == []
    assert points_in_boundary(stops, []) == []


def test_selection_preserves_input_order_and_objects(square):
    stops = [Stop("c", 9, 9), Stop("x", 11, 5), Stop("a", 1, 1), Stop("b", 5, 5)]

    selected = points_in_boundary(stops, square)

    assert [s.id for s in selected] == ["c", "a", "b"]
    assert selected[0] is stops[0]


def test_concave_boundary_notch_is_outside():
    # U shape opening north: the notch between the arms is outside
    u_shape = [
        GeoPoint(0, 0), GeoPoint(0, 9), GeoPoint(9, 9), GeoPoint(9, 6),
        GeoPoint(3, 6), GeoPoint(3, 3), GeoPoint(9, 3), GeoPoint(9, 0),
    ]

    assert point_in_polygon(GeoPoint(1, 4.5), u_shape)
    assert point_in_polygon(GeoPoint(6, 1.5), u_shape)
    assert not point_in_polygon(GeoPoint(6, 4.5), u_shape)


def test_real_world_block():
    block = [(33.459, -112.082), (33.459, -112.064), (33.444, -112.064), (33.444, -112.082)]

    assert point_in_polygon(GeoPoint(33.4484, -112.074), block)
    assert not point_in_polygon(GeoPoint(33.47, -112.074), block)
