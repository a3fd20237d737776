"""
Voters domain package.

Public API:
- Domain model: Voter
- Attribute filters: VoterFilter, apply_filters, party_breakdown
- Canvass results: classify_result, is_contacted, ResultBucket
- Loading: voters_from_frame, load_voters_csv, VoterDataError
"""
from .models import Voter
from .filters import PARTY_OPTIONS, VoterFilter, apply_filters, party_breakdown
from .results import ResultBucket, classify_result, is_contacted
from .loader import VoterDataError, load_voters_csv, voters_from_frame

__all__ = ["Voter",
           "PARTY_OPTIONS",
           "VoterFilter",
           "apply_filters",
           "party_breakdown",
           "ResultBucket",
           "classify_result",
           "is_contacted",
           "VoterDataError",
           "load_voters_csv",
           "voters_from_frame",
           ]
