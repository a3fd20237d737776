"""
Presentation helpers for route metrics (walk sheets, route preview).
"""

from __future__ import annotations

from routing.eta_service import round_half_up


def format_distance(meters: float) -> str:
    """500 -> '500 m', 1500 -> '1.5 km'"""
    if meters < 1000:
        return f"{round_half_up(meters)} m"
    return f"{meters / 1000:.1f} km"


def format_duration(minutes: int) -> str:
    """45 -> '45 min', 125 -> '2h 5m'"""
    if minutes < 60:
        return f"{minutes} min"
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"
