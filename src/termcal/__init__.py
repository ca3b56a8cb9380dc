"""termcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .core.errors import TermcalError, UsageError
from .core.time import days_in_month, first_weekday, is_leap_year, month_name
from .core.types import CalOptions, MonthGrid, YearMonth
from .layout import collect_months, format_calendar, month_window, print_calendar, tile_rows
from .render import render_month

__all__ = [
    "TermcalError",
    "UsageError",
    "is_leap_year",
    "days_in_month",
    "first_weekday",
    "month_name",
    "CalOptions",
    "MonthGrid",
    "YearMonth",
    "render_month",
    "month_window",
    "collect_months",
    "tile_rows",
    "format_calendar",
    "print_calendar",
]
