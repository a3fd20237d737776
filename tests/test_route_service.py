import random
from dataclasses import dataclass
from typing import Optional

from routing.geo import GeoPoint
from routing.route_service import partition_located, sequence


@dataclass
class Stop:
    id: str
    latitude: Optional[float]
    longitude: Optional[float]


def test_three_stop_triangle_golden_order():
    """
    From (0,0), A(0,1) and C(1,0) are exactly the same haversine distance away,
    so the tie goes to A (first in input order). From A, B(0,2) is one degree
    of longitude away while C is further, then C is last.
    """
    a = Stop("A", 0, 1)
    b = Stop("B", 0, 2)
    c = Stop("C", 1, 0)

    route = sequence([a, b, c], GeoPoint(0, 0))

    assert [s.id for s in route] == ["A", "B", "C"]


def test_nearest_neighbour_walks_a_street():
    stops = [Stop("far", 0, 0.004), Stop("near", 0, 0.001), Stop("mid", 0, 0.002)]

    route = sequence(stops, (0, 0.0001))

    assert [s.id for s in route] == ["near", "mid", "far"]


def test_unlocated_points_go_last_in_original_order():
    stops = [
        Stop("u1", None, None),
        Stop("l1", 33.45, -112.07),
        Stop("u2", 0, 0),
        Stop("l2", 33.46, -112.07),
        Stop("l3", 33.47, -112.07),
    ]

    route = sequence(stops, GeoPoint(33.44, -112.07))

    assert [s.id for s in route] == ["l1", "l2", "l3", "u1", "u2"]


def test_empty_and_single_inputs():
    assert sequence([], GeoPoint(0, 0)) == []

    only = Stop("only", 33.4, -112.0)
    assert sequence([only], GeoPoint(0, 0)) == [only]

    lost = Stop("lost", None, None)
    assert sequence([lost, only], GeoPoint(0, 0)) == [only, lost]


def test_sequence_does_not_mutate_input():
    stops = [Stop("b", 0, 2), Stop("a", 0, 1)]
    snapshot = list(stops)

    route = sequence(stops, GeoPoint(0, 0))

    assert stops == snapshot
    assert route is not stops


def test_route_is_permutation_random_trials():
    """
    For random inputs (some unlocated) the route always contains every input
    exactly once, located points first.
    """
    rng = random.Random(42)

    for trial in range(100):
        count = rng.randint(1, 50)
        stops = []
        for i in range(count):
            roll = rng.random()
            if roll < 0.1:
                stops.append(Stop(f"{trial}-{i}", None, None))
            elif roll < 0.15:
                stops.append(Stop(f"{trial}-{i}", 0, 0))
            else:
                stops.append(Stop(f"{trial}-{i}", rng.uniform(33.3, 33.6), rng.uniform(-112.3, -111.9)))
        rng.shuffle(stops)

        route = sequence(stops, GeoPoint(33.4484, -112.074))

        assert sorted(id(s) for s in route) == sorted(id(s) for s in stops)
        assert len(route) == len(stops)

        located, unlocated = partition_located(stops)
        assert route[len(located):] == unlocated


def test_sequence_is_deterministic():
    rng = random.Random(3)
    stops = [Stop(str(i), rng.uniform(33.4, 33.5), rng.uniform(-112.1, -112.0)) for i in range(40)]

    first = sequence(stops, GeoPoint(33.45, -112.05))
    second = sequence(stops, GeoPoint(33.45, -112.05))

    assert [s.id for s in first] == [s.id for s in second]


def test_partition_located_resolves_locations():
    stops = [Stop("a", 1, 2), Stop("b", None, 2), Stop("c", 3, 4)]

    located, unlocated = partition_located(stops)

    assert [(s.id, loc) for s, loc in located] == [("a", GeoPoint(1, 2)), ("c", GeoPoint(3, 4))]
    assert [s.id for s in unlocated] == ["b"]
