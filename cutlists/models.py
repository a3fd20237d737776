"""
Purpose: Domain models for the Cut Lists capability.
What it does:
- Defines core data structures:
- CutList (id, name, description, boundary polygon)
- RoutePlan (ordered stops + distance/time metrics and their display labels)
- ProgressSummary (canvass result counts for a cut list)

Rule: No routing calls, no filtering logic. Models only.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from routing.geo import GeoPoint, as_geopoint
from routing.geofence import MIN_BOUNDARY_VERTICES


class CutListError(ValueError):
    """Raised when a stored cut list cannot be turned into a CutList."""
    pass


def parse_boundary(raw: Any) -> Tuple[GeoPoint, ...]:
    """
    Boundary polygons are stored either as a JSON string or as a list of
    {"lat": ..., "lng": ...} objects. None means "not drawn yet".
    """
    if raw is None or raw == "":
        return ()

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CutListError(f"boundary_polygon is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise CutListError("boundary_polygon must be a list of points")

    try:
        return tuple(as_geopoint(vertex) for vertex in raw)
    except (KeyError, TypeError, ValueError) as e:
        raise CutListError(f"boundary_polygon has a malformed vertex: {e}") from e


@dataclass(frozen=True)
class CutList:
    """
    A named canvassing area drawn on the map.
    """
    id: str
    name: str
    description: Optional[str] = None
    boundary: Tuple[GeoPoint, ...] = ()

    @property
    def is_drawable(self) -> bool:
        return len(self.boundary) >= MIN_BOUNDARY_VERTICES

    @staticmethod # Factory method to build a CutList from a stored row
    def from_record(record: Dict[str, Any]) -> CutList:
        cut_list_id = record.get("id")
        if cut_list_id is None or cut_list_id == "":
            raise CutListError("cut list record has no id")

        return CutList(
            id=str(cut_list_id),
            name=record.get("name") or "",
            description=record.get("description"),
            boundary=parse_boundary(record.get("boundary_polygon")),
        )


@dataclass(frozen=True)
class RoutePlan:
    """
    Output of route planning (what the route preview / walk sheet renders).
    """
    stops: List[Any]
    located_count: int
    unlocated_count: int

    distance_m: float
    minutes: int

    distance_label: str
    duration_label: str

    @property
    def stop_count(self) -> int:
        return len(self.stops)


@dataclass(frozen=True)
class ProgressSummary:
    """
    Canvass progress for the voters of a cut list.
    """
    total: int = 0
    contacted: int = 0
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    by_result: Dict[str, int] = field(default_factory=dict)

    @property
    def contact_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.contacted / self.total
