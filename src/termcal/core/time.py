from __future__ import annotations
from typing import Tuple


MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WEEKDAY_HEADER = "Su Mo Tu We Th Fr Sa"

_MONTH_DAYS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)

def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]

def first_weekday(year: int, month: int) -> int:
    """
    Weekday of the 1st of the month, 0=Sunday .. 6=Saturday.

    Zeller's congruence with January and February counted as months 13 and 14
    of the previous year. Floor division keeps it valid for year <= 0.
    """
    if month < 3:
        year -= 1
        month += 12
    k = year % 100
    j = year // 100
    h = (1 + (13 * (month + 1)) // 5 + k + k // 4 + j // 4 + 5 * j) % 7
    # Zeller counts 0=Saturday
    return (h + 6) % 7

def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]

def month_index(year: int, month: int) -> int:
    """Zero-based absolute month count."""
    return year * 12 + (month - 1)

def from_month_index(index: int) -> Tuple[int, int]:
    """Inverse of month_index; divmod floors, so negative indices are fine."""
    year, m0 = divmod(index, 12)
    return year, m0 + 1
