"""
Purpose: Attribute filtering applied after the geofence.
What it does:
Accepts the voters inside a cut-list boundary and narrows them down by the
checkboxes on the cut-list screen (party, lives at property, mail voter).
Also builds the party breakdown shown next to the selection.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .models import Voter

OTHER_PARTY = "Other"
UNKNOWN_PARTY = "Unknown"

PARTY_OPTIONS = (
    "Democratic",
    "Republican",
    "Libertarian",
    "Green",
    "Registered Independent",
    "Non-Partisan",
    OTHER_PARTY,
)

# a party containing none of these (lowercased) counts as "Other"
KNOWN_PARTY_MARKERS = (
    "democrat",
    "republic",
    "libertarian",
    "green",
    "independent",
    "non-partisan",
)


@dataclass(frozen=True)
class VoterFilter:
    """
    Attribute criteria for a cut list. An empty filter keeps everyone.
    """
    parties: FrozenSet[str] = field(default_factory=frozenset)
    lives_at_property_only: bool = False
    mail_voters_only: bool = False

    @property
    def is_active(self) -> bool:
        return bool(self.parties) or self.lives_at_property_only or self.mail_voters_only


def is_other_party(party: Optional[str]) -> bool:
    lowered = (party or "").lower()
    return not any(marker in lowered for marker in KNOWN_PARTY_MARKERS)


def matches_party(voter: Voter, parties: FrozenSet[str]) -> bool:
    if not parties:
        return True

    party = voter.party or ""
    for selected in parties:
        if selected == OTHER_PARTY:
            if is_other_party(party):
                return True
        elif party == selected:
            return True
    return False


def apply_filters(voters: Sequence[Voter], voter_filter: Optional[VoterFilter] = None) -> List[Voter]:
    """
    Order-preserving subset of voters matching every active criterion.
    """
    if voter_filter is None or not voter_filter.is_active:
        return list(voters)

    selected = []
    for voter in voters:
        if not matches_party(voter, voter_filter.parties):
            continue
        if voter_filter.lives_at_property_only and voter.lives_elsewhere:
            continue
        if voter_filter.mail_voters_only and not voter.is_mail_voter:
            continue
        selected.append(voter)
    return selected


def party_breakdown(voters: Sequence[Voter], top: Optional[int] = 5) -> List[Tuple[str, int]]:
    """
    [(party, count)] sorted by count descending; ties keep first-seen order.
    Voters without a party are counted as "Unknown".
    """
    counts = Counter(voter.party or UNKNOWN_PARTY for voter in voters)
    # Counter.most_common is stable for equal counts (insertion order)
    return counts.most_common(top)
