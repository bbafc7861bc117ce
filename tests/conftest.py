from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import pytest
from openpyxl import Workbook

# Ensure project root is on sys.path for absolute imports
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from refcounter.models import Row

HEADER = [["Plan de pose"], ["Support N°", "Type", "Symbole"]]
SAMPLE_ROWS = [["A", "x", "REF1"], ["B", "y", "REF2"], ["C", "z", "REF1"]]


def build_workbook_bytes(sheets: Dict[str, Iterable[Sequence[object]]]) -> bytes:
    workbook = Workbook()
    workbook.remove(workbook.active)
    for title, rows in sheets.items():
        worksheet = workbook.create_sheet(title)
        for row in rows:
            worksheet.append(list(row))
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_workbook() -> Callable[..., bytes]:
    def _make(
        data_rows: Optional[List[Sequence[object]]] = None,
        sheet_name: str = "Plan",
        extra_sheets: Optional[Dict[str, List[Sequence[object]]]] = None,
    ) -> bytes:
        rows = HEADER + list(SAMPLE_ROWS if data_rows is None else data_rows)
        sheets: Dict[str, Iterable[Sequence[object]]] = dict(extra_sheets or {})
        sheets[sheet_name] = rows
        return build_workbook_bytes(sheets)

    return _make


@pytest.fixture
def plan_bytes(make_workbook) -> bytes:
    return make_workbook()


@pytest.fixture
def plan_path(tmp_path, plan_bytes) -> Path:
    path = tmp_path / "plan.xlsx"
    path.write_bytes(plan_bytes)
    return path


@pytest.fixture
def sample_rows() -> List[Row]:
    return [
        Row(index=position, primary=primary, secondary=secondary, key=key)
        for position, (primary, secondary, key) in enumerate(SAMPLE_ROWS)
    ]
