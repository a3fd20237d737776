"""
Purpose: Central configuration for route planning (single source of truth).
What it does:

Stores all tunable route-planning parameters:

WALKING_SPEED_KMH = 5

DWELL_SECONDS = 180 (3 minutes at each door)

START = Phoenix, AZ (33.4484, -112.074)

MAX_WAYPOINTS = 25 (Google Maps cap)

Values can be overridden through the environment (.env):
CANVASS_START_LAT, CANVASS_START_LNG, CANVASS_WALKING_SPEED_KMH,
CANVASS_DWELL_SECONDS, CANVASS_MAX_WAYPOINTS

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

from routing.directions import DEFAULT_CENTER, MAX_WAYPOINTS
from routing.eta_service import DWELL_SECONDS_PER_STOP
from routing.geo import GeoPoint

load_dotenv()

T = TypeVar("T")


@dataclass(frozen=True)
class RoutePolicy:
    """
    Central configuration for cut-list route planning.

    Notes:
    - walking time model: minutes = distance / pace + stops * dwell.
      It is a heuristic for planning a shift, not a promise.
    - start is where canvassers begin when the caller does not pass one.
    """

    # --- Walking time model ---
    walking_speed_kmh: float = 5.0
    dwell_seconds: float = DWELL_SECONDS_PER_STOP

    # --- Start point ---
    start: GeoPoint = DEFAULT_CENTER

    # --- Map hand-off ---
    max_waypoints: int = MAX_WAYPOINTS

    @property
    def walking_speed_mps(self) -> float:
        return self.walking_speed_kmh * 1000 / 3600

    def validate(self) -> None:
        """
        Basic sanity checks. Call once at startup if you want.
        """
        if self.walking_speed_kmh <= 0:
            raise ValueError("walking_speed_kmh must be > 0")

        if self.dwell_seconds < 0:
            raise ValueError("dwell_seconds must be >= 0")

        if not -90 <= self.start.latitude <= 90:
            raise ValueError("start latitude must be within [-90, 90]")

        if not -180 <= self.start.longitude <= 180:
            raise ValueError("start longitude must be within [-180, 180]")

        if self.max_waypoints < 1:
            raise ValueError("max_waypoints must be >= 1")


def _env(name: str, cast: Callable[[str], T], default: T) -> T:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} has an invalid value {raw!r}") from e


def policy_from_env(base: Optional[RoutePolicy] = None) -> RoutePolicy:
    """
    Build a policy from CANVASS_* environment variables, falling back to `base`.
    """
    base = base or RoutePolicy()
    p = RoutePolicy(
        walking_speed_kmh=_env("CANVASS_WALKING_SPEED_KMH", float, base.walking_speed_kmh),
        dwell_seconds=_env("CANVASS_DWELL_SECONDS", float, base.dwell_seconds),
        start=GeoPoint(
            _env("CANVASS_START_LAT", float, base.start.latitude),
            _env("CANVASS_START_LNG", float, base.start.longitude),
        ),
        max_waypoints=_env("CANVASS_MAX_WAYPOINTS", int, base.max_waypoints),
    )
    p.validate()
    return p


def default_policy() -> RoutePolicy:
    """
    Convenience factory for the default policy (environment overrides applied).
    """
    return policy_from_env()


def door_knock_policy() -> RoutePolicy:
    """
    Example: longer conversations at each door (persuasion canvass).
    """
    p = RoutePolicy(dwell_seconds=300)
    p.validate()
    return p


def lit_drop_policy() -> RoutePolicy:
    """
    Example: literature drop, barely stopping at each door.
    """
    p = RoutePolicy(walking_speed_kmh=5.5, dwell_seconds=30)
    p.validate()
    return p
