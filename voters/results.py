"""
Canvass result buckets used for cut-list progress.

Rule: constants + lookups only.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

NOT_CONTACTED = "Not Contacted"

POSITIVE_RESULTS = (
    "Supportive",
    "Strong Support",
    "Leaning",
    "Willing to Volunteer",
    "Requested Sign",
)

NEGATIVE_RESULTS = (
    "Opposed",
    "Strongly Opposed",
    "Do Not Contact",
    "Refused",
)

NEUTRAL_RESULTS = (
    "Undecided",
    "Needs Info",
    "Callback Requested",
)


class ResultBucket(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    OTHER = "other"
    NOT_CONTACTED = "not_contacted"


def is_contacted(result: Optional[str]) -> bool:
    return bool(result) and result != NOT_CONTACTED


def classify_result(result: Optional[str]) -> ResultBucket:
    if not is_contacted(result):
        return ResultBucket.NOT_CONTACTED
    if result in POSITIVE_RESULTS:
        return ResultBucket.POSITIVE
    if result in NEGATIVE_RESULTS:
        return ResultBucket.NEGATIVE
    if result in NEUTRAL_RESULTS:
        return ResultBucket.NEUTRAL
    return ResultBucket.OTHER
