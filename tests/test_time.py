# tests/test_time.py

import pytest
import random
from datetime import date

from termcal.core import time as ct

def test_leap_years():
    assert ct.is_leap_year(2000)
    assert ct.is_leap_year(2024)
    assert not ct.is_leap_year(1900)
    assert not ct.is_leap_year(2023)

@pytest.mark.parametrize("year, month, expected", [
    (2025, 2, 28),
    (2024, 2, 29),
    (2025, 4, 30),
    (2025, 1, 31),
    (1900, 2, 28),
    (2000, 2, 29),
])
def test_days_in_month(year, month, expected):
    assert ct.days_in_month(year, month) == expected

@pytest.mark.parametrize("year, month, expected", [
    (2023, 1, 0),  # Sunday
    (2025, 1, 3),  # Wednesday
    (1900, 1, 1),  # Monday
    (2000, 1, 6),  # Saturday
    (2024, 2, 4),  # Thursday
])
def test_first_weekday_reference_dates(year, month, expected):
    assert ct.first_weekday(year, month) == expected

def test_first_weekday_matches_datetime():
    """
    Cross-check Zeller against the stdlib proleptic Gregorian calendar.
    date.weekday() counts Monday=0, ours counts Sunday=0.
    """
    random.seed(42)
    for _ in range(5000):
        y = random.randint(1, 9999)
        m = random.randint(1, 12)
        assert ct.first_weekday(y, m) == (date(y, m, 1).weekday() + 1) % 7

def test_days_in_month_matches_datetime():
    for y in (1600, 1700, 1999, 2000, 2023, 2024):
        for m in range(1, 12):
            assert ct.days_in_month(y, m) == (date(y, m + 1, 1) - date(y, m, 1)).days
        assert ct.days_in_month(y, 12) == 31

def test_non_positive_years_are_consistent():
    # 400-year Gregorian cycle has a whole number of weeks
    for y in (0, -1, -100, -399):
        assert ct.is_leap_year(y) == ct.is_leap_year(y + 400)
        for m in range(1, 13):
            assert ct.first_weekday(y, m) == ct.first_weekday(y + 400, m)

def test_month_names():
    assert ct.month_name(1) == "January"
    assert ct.month_name(12) == "December"
    assert len(ct.MONTH_NAMES) == 12

def test_month_index_roundtrip_across_zero():
    assert ct.month_index(2023, 1) == 2023 * 12
    assert ct.from_month_index(ct.month_index(2023, 1) - 1) == (2022, 12)
    assert ct.from_month_index(-1) == (-1, 12)
    assert ct.from_month_index(0) == (0, 1)
