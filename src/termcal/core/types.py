from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .errors import UsageError
from .time import from_month_index, month_index

# Eight 20-column lines: title, weekday header, up to six weeks, blank padding.
MonthGrid = Tuple[str, ...]

GRID_WIDTH = 20
GRID_HEIGHT = 8


@dataclass(frozen=True)
class YearMonth:
    year: int
    month: int  # 1..12

    @property
    def index(self) -> int:
        return month_index(self.year, self.month)

    @classmethod
    def from_index(cls, index: int) -> "YearMonth":
        return cls(*from_month_index(index))

    def shift(self, months: int) -> "YearMonth":
        return YearMonth.from_index(self.index + months)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class CalOptions:
    """Validated calendar request. month == 0 selects the whole year."""
    year: int
    month: int = 0
    before: int = 0
    after: int = 0
    row_num: int = 3

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 12:
            raise UsageError("Month must be in [1, 12]")
        if self.before < 0 or self.after < 0:
            raise UsageError("before/after must be non-negative")
        if self.row_num < 1:
            raise UsageError("row_num must be at least 1")

    @property
    def whole_year(self) -> bool:
        return self.month == 0
