"""Exceptions raised while loading a planning workbook."""

from __future__ import annotations

from typing import Optional, Sequence


class ParseError(Exception):
    """Base class for failures that leave the row store untouched."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source


class SheetNotFound(ParseError):
    """The workbook does not contain the required sheet."""

    def __init__(
        self,
        sheet_name: str,
        available: Sequence[str] = (),
        source: Optional[str] = None,
    ) -> None:
        super().__init__(f"No '{sheet_name}' sheet found in the workbook", source)
        self.sheet_name = sheet_name
        self.available = list(available)


class MalformedFile(ParseError):
    """The payload cannot be read as a spreadsheet."""


__all__ = ["ParseError", "SheetNotFound", "MalformedFile"]
