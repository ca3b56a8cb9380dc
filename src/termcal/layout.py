"""
termcal.layout
--------------
Chooses which months to show and tiles their grids side by side.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence, TextIO

from termcal.core.types import GRID_HEIGHT, CalOptions, MonthGrid, YearMonth
from termcal.render import render_month

logger = logging.getLogger(__name__)

GUTTER = "  "


def month_window(opts: CalOptions) -> List[YearMonth]:
    """
    Months to render, in chronological order.

    Whole-year mode gives January..December. Otherwise the anchor month is
    widened by `before` and `after`; offsets are applied to the absolute month
    index so the window may cross any number of year boundaries.
    """
    if opts.whole_year:
        months = [YearMonth(opts.year, m) for m in range(1, 13)]
    else:
        anchor = YearMonth(opts.year, opts.month)
        months = [anchor.shift(k) for k in range(-opts.before, opts.after + 1)]
    logger.debug("month window: %s .. %s (%d months)",
                 months[0], months[-1], len(months))
    return months


def collect_months(opts: CalOptions) -> List[MonthGrid]:
    return [render_month(ym.year, ym.month) for ym in month_window(opts)]


def tile_rows(grids: Sequence[MonthGrid], row_num: int) -> List[str]:
    """Lay grids out `row_num` per row; each row is followed by an empty line."""
    out: List[str] = []
    for start in range(0, len(grids), row_num):
        row = grids[start:start + row_num]
        for i in range(GRID_HEIGHT):
            out.append(GUTTER.join(g[i] for g in row))
        out.append("")
    return out


def format_calendar(opts: CalOptions) -> str:
    lines = tile_rows(collect_months(opts), opts.row_num)
    return "\n".join(lines) + "\n"


def print_calendar(opts: CalOptions, file: Optional[TextIO] = None) -> None:
    out = sys.stdout if file is None else file
    out.write(format_calendar(opts))
