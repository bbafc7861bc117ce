"""IO helpers for reading the planning sheet out of a workbook."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, BinaryIO, List, Optional, Union

import numpy as np
import pandas as pd

from .errors import MalformedFile, SheetNotFound
from .models import Row

logger = logging.getLogger(__name__)

PLAN_SHEET_NAME = "Plan"
HEADER_ROWS = 2
ROW_FIELDS = 3

WorkbookSource = Union[bytes, bytearray, BinaryIO, str, Path]


def parse_workbook(source: WorkbookSource, name: Optional[str] = None) -> List[Row]:
    """Parse the ``Plan`` sheet of a workbook into ordered :class:`Row` records.

    ``source`` may be raw bytes, a binary stream such as an uploaded file or a
    filesystem path.  The first two rows of the sheet are headers and are
    skipped.  Only the first three columns are kept, missing cells become
    empty strings and every row starts unselected.

    Raises :class:`SheetNotFound` when the workbook has no ``Plan`` sheet and
    :class:`MalformedFile` when the payload is not a readable spreadsheet.
    """

    label = name or _source_label(source)
    logger.info("Reading workbook %s", label)
    frame = _read_plan_sheet(source, label)

    data_part = frame.iloc[HEADER_ROWS:]
    rows: List[Row] = []
    for position, raw in enumerate(data_part.itertuples(index=False, name=None)):
        cells = [_cell_text(value) for value in raw[:ROW_FIELDS]]
        cells.extend([""] * (ROW_FIELDS - len(cells)))
        rows.append(
            Row(
                index=position,
                primary=cells[0],
                secondary=cells[1],
                key=cells[2],
                selected=False,
            )
        )

    logger.info("Loaded %d rows from sheet '%s' of %s", len(rows), PLAN_SHEET_NAME, label)
    return rows


def _read_plan_sheet(source: WorkbookSource, label: str) -> pd.DataFrame:
    excel_input = _as_excel_input(source)
    try:
        excel = pd.ExcelFile(excel_input)
    except Exception as exc:
        raise MalformedFile(f"Unable to read '{label}' as a spreadsheet: {exc}", label) from exc

    with excel:
        sheet_names = [str(sheet) for sheet in excel.sheet_names]
        logger.debug("Workbook %s contains sheets %s", label, sheet_names)
        if PLAN_SHEET_NAME not in sheet_names:
            raise SheetNotFound(PLAN_SHEET_NAME, available=sheet_names, source=label)
        try:
            return excel.parse(
                PLAN_SHEET_NAME,
                header=None,
                dtype=object,
                keep_default_na=False,
            )
        except Exception as exc:
            raise MalformedFile(
                f"Unable to read sheet '{PLAN_SHEET_NAME}' of '{label}': {exc}", label
            ) from exc


def _as_excel_input(source: WorkbookSource) -> Any:
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(bytes(source))
    if isinstance(source, (str, Path)):
        path = Path(source).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Workbook '{path}' does not exist")
        return path
    if hasattr(source, "seek"):
        source.seek(0)
    return source


def _source_label(source: WorkbookSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    if isinstance(source, (bytes, bytearray)):
        return "<bytes>"
    return str(getattr(source, "name", "<stream>"))


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if np.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return str(value)
    if value is pd.NaT:
        return ""
    return str(value)


__all__ = ["HEADER_ROWS", "PLAN_SHEET_NAME", "parse_workbook"]
