"""Frequency counts of the key column over the selected rows."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .models import Row, TallyMap

TALLY_COLUMNS = ("reference", "count")


def compute_tally(rows: Iterable[Row]) -> TallyMap:
    """Count selected rows per key, in order of each key's first selected row.

    Keys without a selected row are absent.  The empty string is a key like
    any other.
    """

    counts: TallyMap = {}
    for row in rows:
        if row.selected:
            counts[row.key] = counts.get(row.key, 0) + 1
    return counts


def tally_frame(tally: TallyMap) -> pd.DataFrame:
    """Return the tally as a two column frame preserving its order."""

    if not tally:
        return pd.DataFrame(
            {"reference": pd.Series(dtype=str), "count": pd.Series(dtype=int)}
        )
    return pd.DataFrame(list(tally.items()), columns=list(TALLY_COLUMNS))


__all__ = ["TALLY_COLUMNS", "compute_tally", "tally_frame"]
