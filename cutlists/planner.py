"""
Purpose: The cut-list "orchestrator" (single entry point).
What it does:

Coordinates the pipeline end-to-end:

- takes the campaign's voters and a cut list (boundary)

- keeps the voters inside the boundary (routing.geofence)

- applies attribute filters (voters.filters)

- orders the selection into a walk (routing.route_service)

- derives distance / walk time and their labels (routing.eta_service, routing.formatting)

Typical public function signatures:

- select_voters(voters, cut_list, voter_filter) -> List[Voter]

- plan_route(voters, start, policy) -> RoutePlan

- summarize_progress(voters) -> ProgressSummary

Rule: Planner is the only file other modules should call directly for cut-list routing.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, List, Optional, Sequence

from routing.eta_service import estimated_minutes, total_distance
from routing.formatting import format_distance, format_duration
from routing.geofence import points_in_boundary
from routing.geo import as_geopoint
from routing.route_service import partition_located, sequence
from voters.filters import VoterFilter, apply_filters
from voters.models import Voter
from voters.results import ResultBucket, classify_result

from .models import CutList, ProgressSummary, RoutePlan
from .policy import RoutePolicy, default_policy

logger = logging.getLogger(__name__)


def select_voters(
    voters: Sequence[Voter],
    cut_list: CutList,
    voter_filter: Optional[VoterFilter] = None,
) -> List[Voter]:
    """
    Voters of a cut list: inside its boundary, then narrowed by attribute filters.

    A boundary still being drawn (< 3 points) selects nobody.
    """
    inside = points_in_boundary(voters, cut_list.boundary)
    selected = apply_filters(inside, voter_filter)

    logger.debug(
        "cut list %s: %d voters, %d inside boundary, %d after filters",
        cut_list.id, len(voters), len(inside), len(selected),
    )
    return selected


def plan_route(
    stops: Sequence[Any],
    start: Optional[Any] = None,
    policy: Optional[RoutePolicy] = None,
) -> RoutePlan:
    """
    Main route planning entry point (pure algorithm).

    It does NOT mutate the stops. It only:
      - sequences them nearest-neighbour from `start` (policy.start when omitted)
      - measures the walk over located stops
      - estimates minutes with the policy's pace and dwell time

    Every stop counts toward dwell time, including unlocated ones, since the
    canvasser still has to find those doors.
    """
    policy = policy or default_policy()
    policy.validate()

    origin = as_geopoint(start) if start is not None else policy.start

    ordered = sequence(stops, origin)
    located, unlocated = partition_located(ordered)

    distance_m = total_distance(ordered)
    minutes = estimated_minutes(
        distance_m,
        len(ordered),
        walking_speed_mps=policy.walking_speed_mps,
        dwell_seconds=policy.dwell_seconds,
    )

    if unlocated:
        logger.debug("%d stops need geocoding and were placed at the end of the route", len(unlocated))

    return RoutePlan(
        stops=ordered,
        located_count=len(located),
        unlocated_count=len(unlocated),
        distance_m=distance_m,
        minutes=minutes,
        distance_label=format_distance(distance_m),
        duration_label=format_duration(minutes),
    )


def summarize_progress(voters: Sequence[Voter]) -> ProgressSummary:
    """
    Count canvass outcomes for a cut list's voters.
    """
    buckets = Counter(classify_result(voter.canvass_result) for voter in voters)
    by_result = Counter(voter.canvass_result for voter in voters if voter.canvass_result)

    return ProgressSummary(
        total=len(voters),
        contacted=len(voters) - buckets[ResultBucket.NOT_CONTACTED],
        positive=buckets[ResultBucket.POSITIVE],
        negative=buckets[ResultBucket.NEGATIVE],
        neutral=buckets[ResultBucket.NEUTRAL],
        by_result=dict(by_result),
    )
