#Purpose: Walk-time estimation policy.
#Converts a sequenced route into the numbers shown next to a cut list:
#total walking distance along the located stops
#estimated minutes = walking time at a fixed pace + fixed dwell time per door
#This is a deliberately simple linear heuristic, not a calibrated prediction.

from __future__ import annotations

import math
from typing import Any, Sequence

from routing.geo import distance, location_of

WALKING_SPEED_MPS = 5000 / 3600 # 5 km/h
DWELL_SECONDS_PER_STOP = 180 # 3 minutes at each door


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with .5 going up, the way the dashboard rounds.
    Python's round() would send 2.5 to 2.
    """
    return int(math.floor(value + 0.5))


def total_distance(route: Sequence[Any]) -> float:
    """
    Sum of leg distances (meters) between consecutive located stops.

    Unlocated stops are skipped entirely; they contribute no legs.
    """
    locations = [location for location in (location_of(stop) for stop in route) if location is not None]

    total = 0.0
    for a, b in zip(locations[:-1], locations[1:]):
        total += distance(a, b)
    return total


def estimated_minutes(
    total_distance_m: float,
    stop_count: int,
    *,
    walking_speed_mps: float = WALKING_SPEED_MPS,
    dwell_seconds: float = DWELL_SECONDS_PER_STOP,
) -> int:
    """
    Estimated minutes to walk the route and knock on every door.

    round((distance / pace + stops * dwell) / 60)
    """
    walk_seconds = total_distance_m / walking_speed_mps
    stop_seconds = stop_count * dwell_seconds
    return round_half_up((walk_seconds + stop_seconds) / 60)
