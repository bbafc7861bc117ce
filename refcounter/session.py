"""Command dispatch for one interactive counting session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .io import WorkbookSource, parse_workbook
from .models import Row, TallyMap
from .reporting import serialize_tally
from .store import RowStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseFile:
    """Load a new workbook, replacing every row on success."""

    data: WorkbookSource
    name: Optional[str] = None


@dataclass(frozen=True)
class ToggleRow:
    index: int


@dataclass(frozen=True)
class Export:
    pass


Command = Union[ParseFile, ToggleRow, Export]


class CounterSession:
    """Applies user commands to a :class:`RowStore` it owns.

    Each command runs synchronously.  Parse failures propagate to the caller
    and leave the store exactly as it was.
    """

    def __init__(self, store: Optional[RowStore] = None) -> None:
        self.store = store if store is not None else RowStore()

    def dispatch(self, command: Command) -> Union[Tuple[Row, ...], TallyMap, str]:
        if isinstance(command, ParseFile):
            rows = parse_workbook(command.data, name=command.name)
            self.store.replace_all(rows)
            return self.store.snapshot()
        if isinstance(command, ToggleRow):
            self.store.toggle(command.index)
            return self.store.tally
        if isinstance(command, Export):
            content = serialize_tally(self.store.tally)
            logger.debug("Exported %d characters", len(content))
            return content
        raise TypeError(f"Unsupported command: {command!r}")

    def parse_file(self, data: WorkbookSource, name: Optional[str] = None) -> Tuple[Row, ...]:
        return self.dispatch(ParseFile(data, name))  # type: ignore[return-value]

    def toggle_row(self, index: int) -> TallyMap:
        return self.dispatch(ToggleRow(index))  # type: ignore[return-value]

    def export(self) -> str:
        return self.dispatch(Export())  # type: ignore[return-value]


__all__ = ["Command", "CounterSession", "Export", "ParseFile", "ToggleRow"]
