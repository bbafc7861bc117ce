"""Row records produced by the worksheet parser."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Tuple

TallyMap = Dict[str, int]


@dataclass
class Row:
    """Three-field projection of a sheet row plus its selection flag."""

    index: int
    primary: str = ""
    secondary: str = ""
    key: str = ""
    selected: bool = False

    @property
    def fields(self) -> Tuple[str, str, str]:
        return (self.primary, self.secondary, self.key)

    def copy(self) -> "Row":
        return replace(self)

    def as_dict(self) -> Dict[str, object]:
        return {
            "index": self.index,
            "selected": self.selected,
            "primary": self.primary,
            "secondary": self.secondary,
            "key": self.key,
        }


__all__ = ["Row", "TallyMap"]
