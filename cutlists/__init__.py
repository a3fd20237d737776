"""
Cut lists domain package.

Public API:
- Domain models: CutList, RoutePlan, ProgressSummary, CutListError
- Planning entry: select_voters, plan_route, summarize_progress
- RoutePolicy
"""

from .models import CutList, CutListError, ProgressSummary, RoutePlan
from .policy import RoutePolicy, default_policy, door_knock_policy, lit_drop_policy
from .planner import plan_route, select_voters, summarize_progress

__all__ = [
    "CutList",
    "CutListError",
    "ProgressSummary",
    "RoutePlan",
    "RoutePolicy",
    "default_policy",
    "door_knock_policy",
    "lit_drop_policy",
    "plan_route",
    "select_voters",
    "summarize_progress",
]
