"""
Purpose: Core data models for the voters domain.
What it does:
Defines the voter record the routing layer canvasses, without relying on any storage client.
Only latitude/longitude matter to routing; everything else is payload carried through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from routing.geo import GeoPoint, locate

UNKNOWN_NAME = "Unknown"


@dataclass
class Voter:
    """
    A single voter / household row as exported from the voter database.
    """
    unique_id: str

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    owner_name: Optional[str] = None

    street_num: Optional[str] = None
    street_dir: Optional[str] = None
    street_name: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None

    party: Optional[str] = None

    # nullable: rows that were never geocoded come through as None or 0,0
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    lives_elsewhere: bool = False
    is_mail_voter: bool = False
    canvass_result: Optional[str] = None

    @property
    def location(self) -> Optional[GeoPoint]:
        return locate(self.latitude, self.longitude)

    @property
    def display_name(self) -> str:
        if self.first_name or self.last_name:
            return f"{self.first_name or ''} {self.last_name or ''}".strip()
        return self.owner_name or UNKNOWN_NAME

    @property
    def address(self) -> str:
        parts = [self.street_num, self.street_dir, self.street_name, self.city]
        return " ".join(part for part in parts if part)
