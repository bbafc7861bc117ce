"""In-memory store for the parsed rows and their selection state."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

import pandas as pd

from .models import Row, TallyMap
from .tally import compute_tally

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ("index", "selected", "primary", "secondary", "key")


class RowStore:
    """Ordered rows of one loaded sheet together with the derived tally.

    The tally is recomputed from scratch after every mutation so a caller
    never sees a toggled row next to a stale count.
    """

    def __init__(self) -> None:
        self._rows: List[Row] = []
        self._positions: Dict[int, int] = {}
        self._tally: TallyMap = {}
        self._loaded = False

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def tally(self) -> TallyMap:
        return dict(self._tally)

    def replace_all(self, rows: Iterable[Row]) -> None:
        """Discard the current rows and selection and install ``rows``."""

        self._rows = [row.copy() for row in rows]
        self._positions = {row.index: position for position, row in enumerate(self._rows)}
        self._loaded = True
        self._recompute()
        logger.info("Row store loaded with %d rows", len(self._rows))

    def toggle(self, index: int) -> None:
        """Flip the selection of the row with ``index``; unknown indices are ignored."""

        position = self._positions.get(index)
        if position is None:
            logger.debug("Ignoring toggle of unknown row index %s", index)
            return
        row = self._rows[position]
        row.selected = not row.selected
        self._recompute()
        logger.debug("Row %d selected=%s", index, row.selected)

    def snapshot(self) -> Tuple[Row, ...]:
        return tuple(row.copy() for row in self._rows)

    def selected_indices(self) -> List[int]:
        return [row.index for row in self._rows if row.selected]

    def to_frame(self) -> pd.DataFrame:
        """Return the rows as a frame for presentation."""

        if not self._rows:
            return pd.DataFrame(columns=list(FRAME_COLUMNS))
        return pd.DataFrame([row.as_dict() for row in self._rows], columns=list(FRAME_COLUMNS))

    def _recompute(self) -> None:
        self._tally = compute_tally(self._rows)


__all__ = ["FRAME_COLUMNS", "RowStore"]
