"""Reference counter core package.

Loads the ``Plan`` sheet of a workbook, keeps track of which rows the user
selected and counts the references (third column) of the selected rows.  The
same building blocks power the Streamlit page in ``ui_app.py`` and the
command line interface.
"""

from .config import AppConfig, ExportConfig, LoggingConfig, UIConfig, load_config
from .errors import MalformedFile, ParseError, SheetNotFound
from .io import HEADER_ROWS, PLAN_SHEET_NAME, parse_workbook
from .models import Row, TallyMap
from .reporting import export_tally, serialize_tally, tally_to_bytes
from .session import CounterSession, Export, ParseFile, ToggleRow
from .store import RowStore
from .tally import compute_tally, tally_frame

__all__ = [
    "AppConfig",
    "CounterSession",
    "Export",
    "ExportConfig",
    "HEADER_ROWS",
    "LoggingConfig",
    "MalformedFile",
    "PLAN_SHEET_NAME",
    "ParseError",
    "ParseFile",
    "Row",
    "RowStore",
    "SheetNotFound",
    "TallyMap",
    "ToggleRow",
    "UIConfig",
    "compute_tally",
    "export_tally",
    "load_config",
    "parse_workbook",
    "serialize_tally",
    "tally_frame",
    "tally_to_bytes",
]
