"""
Purpose: Adapter from tabular voter exports to Voter records.
What it does:
- Maps a pandas DataFrame (or a CSV read through pandas) row by row to Voter
- Normalizes empty cells (NaN) to None so the routing layer sees "unlocated"
- Fails fast when the columns routing depends on are missing

Rule: No routing here. Shape conversion only.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, List, Optional, Union
from pathlib import Path

import pandas as pd

from .models import Voter

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("unique_id", "latitude", "longitude")

BOOLEAN_COLUMNS = ("lives_elsewhere", "is_mail_voter")
FLOAT_COLUMNS = ("latitude", "longitude")


class VoterDataError(ValueError):
    """Raised when a voter table cannot be mapped to Voter records."""
    pass


def _clean(value: Any) -> Optional[Any]:
    if value is None:
        return None
    if pd.isna(value):
        return None
    return value


def _as_text(value: Any) -> Optional[str]:
    value = _clean(value)
    if value is None:
        return None
    # a numeric column with any blank cell is promoted to float: 1001 -> 1001.0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def _as_bool(value: Any) -> bool:
    value = _clean(value)
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in ("true", "t", "yes", "y", "1")
    return bool(value)


def _as_float(value: Any) -> Optional[float]:
    value = _clean(value)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def voters_from_frame(df: pd.DataFrame) -> List[Voter]:
    """
    Convert a voter DataFrame into Voter records (row order preserved).

    Unknown columns are ignored, missing optional columns default.
    Rows without a unique_id are skipped with a warning.

    Raises:
        VoterDataError: a required column is absent.
    """
    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise VoterDataError(f"Voter table is missing required columns: {', '.join(missing)}")

    voter_fields = [f.name for f in fields(Voter)]
    columns = [name for name in voter_fields if name in df.columns]

    voters: List[Voter] = []
    skipped = 0
    for row in df[columns].to_dict(orient="records"):
        unique_id = _as_text(row.get("unique_id"))
        if unique_id is None:
            skipped += 1
            continue

        values = {}
        for name in columns:
            if name == "unique_id":
                continue
            if name in BOOLEAN_COLUMNS:
                values[name] = _as_bool(row[name])
            elif name in FLOAT_COLUMNS:
                values[name] = _as_float(row[name])
            else:
                values[name] = _as_text(row[name])

        voters.append(Voter(unique_id=unique_id, **values))

    if skipped:
        logger.warning("Skipped %d voter rows without unique_id", skipped)

    return voters


def load_voters_csv(path: Union[str, Path]) -> List[Voter]:
    """
    Read a voter CSV export. Ids and address parts are read as text so
    leading zeros (zip, street numbers) survive.
    """
    df = pd.read_csv(
        path,
        dtype={
            "unique_id": str,
            "street_num": str,
            "zip": str,
        },
    )
    return voters_from_frame(df)
