from dataclasses import dataclass
from typing import Optional

import pytest

from routing.directions import DEFAULT_CENTER, route_bounds, walking_directions_url
from routing.eta_service import estimated_minutes, total_distance
from routing.formatting import format_distance, format_duration
from routing.geo import GeoPoint, distance


@dataclass
class Stop:
    id: str
    latitude: Optional[float]
    longitude: Optional[float]


def test_total_distance_skips_unlocated_stops():
    a = Stop("a", 0, 0.001)
    lost = Stop("lost", None, None)
    b = Stop("b", 0, 0.002)
    c = Stop("c", 0, 0.004)

    expected = distance(GeoPoint(0, 0.001), GeoPoint(0, 0.002)) + distance(GeoPoint(0, 0.002), GeoPoint(0, 0.004))

    assert total_distance([a, lost, b, c]) == pytest.approx(expected)


def test_total_distance_degenerate_routes():
    assert total_distance([]) == 0.0
    assert total_distance([Stop("a", 33.4, -112.0)]) == 0.0
    assert total_distance([Stop("a", None, None), Stop("b", 0, 0)]) == 0.0


def test_estimated_minutes_walk_plus_dwell():
    # 1 km at 5 km/h = 12 min, plus 2 stops * 3 min
    assert estimated_minutes(1000, 2) == 18
    assert estimated_minutes(0, 0) == 0
    assert estimated_minutes(0, 10) == 30


def test_estimated_minutes_rounds_half_up():
    assert estimated_minutes(0, 1, dwell_seconds=150) == 3
    assert estimated_minutes(0, 1, dwell_seconds=89) == 1


def test_estimated_minutes_custom_pace():
    # 1 km at 6 km/h is 10 minutes
    assert estimated_minutes(1000, 0, walking_speed_mps=6000 / 3600) == 10


@pytest.mark.parametrize(
    "meters, label",
    [(500, "500 m"), (1500, "1.5 km"), (0, "0 m"), (999.4, "999 m"), (1000, "1.0 km"), (12345, "12.3 km")],
)
def test_format_distance(meters, label):
    assert format_distance(meters) == label


@pytest.mark.parametrize(
    "minutes, label",
    [(45, "45 min"), (125, "2h 5m"), (0, "0 min"), (59, "59 min"), (60, "1h 0m")],
)
def test_format_duration(minutes, label):
    assert format_duration(minutes) == label


def test_route_bounds():
    route = [Stop("a", 33.45, -112.07), Stop("lost", None, None), Stop("b", 33.46, -112.09)]

    south_west, north_east = route_bounds(route)

    assert south_west == GeoPoint(33.45, -112.09)
    assert north_east == GeoPoint(33.46, -112.07)
    assert route_bounds([]) == (DEFAULT_CENTER, DEFAULT_CENTER)


def test_walking_directions_url():
    route = [Stop("a", 33.45, -112.07), Stop("lost", 0, 0), Stop("b", 33.46, -112.08)]

    url = walking_directions_url(route)

    assert url == (
        "https://www.google.com/maps/dir/?api=1"
        "&origin=33.45,-112.07"
        "&destination=33.46,-112.08"
        "&waypoints=33.45,-112.07|33.46,-112.08"
        "&travelmode=walking"
    )


def test_walking_directions_url_caps_waypoints():
    route = [Stop(str(i), 33.4 + i / 1000, -112.0) for i in range(30)]

    url = walking_directions_url(route, max_waypoints=25)
    waypoints = url.split("&waypoints=")[1].split("&")[0]

    assert len(waypoints.split("|")) == 25
    assert f"&destination={route[-1].latitude},{route[-1].longitude}&" in url
    assert walking_directions_url([Stop("lost", None, None)]) == ""
