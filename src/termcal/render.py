"""
termcal.render
--------------
Text rendering of a single month in the style of Unix ``cal``.
"""

from __future__ import annotations

import logging
from typing import List

from termcal.core.time import WEEKDAY_HEADER, days_in_month, first_weekday, month_name
from termcal.core.types import GRID_HEIGHT, GRID_WIDTH, MonthGrid

logger = logging.getLogger(__name__)

BLANK_CELL = "  "


def title_line(year: int, month: int) -> str:
    title = f"{month_name(month)} {year}"
    # format-spec centring puts the odd space on the right, str.center does not
    return f"{title:^{GRID_WIDTH}}"


def week_lines(year: int, month: int) -> List[str]:
    """
    Week rows of the month, Sunday first. Every row is seven 2-char cells
    joined by single spaces, blanks included, so all rows are GRID_WIDTH wide.
    """
    cells = [BLANK_CELL] * first_weekday(year, month)
    cells += [f"{day:>2}" for day in range(1, days_in_month(year, month) + 1)]
    cells += [BLANK_CELL] * (-len(cells) % 7)
    return [" ".join(cells[i:i + 7]) for i in range(0, len(cells), 7)]


def render_month(year: int, month: int) -> MonthGrid:
    """Render one month as exactly GRID_HEIGHT lines of GRID_WIDTH columns."""
    lines = [title_line(year, month), WEEKDAY_HEADER]
    lines += week_lines(year, month)
    lines += [" " * GRID_WIDTH] * (GRID_HEIGHT - len(lines))
    logger.debug("rendered %04d-%02d (%d week rows)", year, month, len(lines) - 2)
    return tuple(lines)
