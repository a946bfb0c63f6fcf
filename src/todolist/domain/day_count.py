"""Linear day numbering for ``Date`` values.

Day counts run continuously from the start of year 0: January 1 of year 0 is
day 0, January 1 of year 1 is day 366 (year 0 is a leap year). Every integer is
a valid day count, including negative ones.
"""

from __future__ import annotations

from typing import Final

from todolist.domain.calendar_rules import days_in_month
from todolist.domain.dates import Date

DAYS_PER_YEAR: Final[int] = 365
DAYS_PER_4_YEARS: Final[int] = 4 * DAYS_PER_YEAR + 1
DAYS_PER_100_YEARS: Final[int] = 25 * DAYS_PER_4_YEARS - 1
DAYS_PER_400_YEARS: Final[int] = 4 * DAYS_PER_100_YEARS + 1


def _days_before_year(year: int) -> int:
    # Leap days of all years strictly before ``year``; floor division keeps the
    # count linear across year 0.
    previous = year - 1
    return DAYS_PER_YEAR * year + previous // 4 - previous // 100 + previous // 400


def _days_before_month(month: int, year: int) -> int:
    return sum(days_in_month(m, year) for m in range(1, month))


_YEAR_ONE_START: Final[int] = _days_before_year(1) + 1


def encode(date: Date) -> int:
    """Return the day count of ``date`` (see module docstring for the epoch)."""

    return _days_before_year(date.year) + _days_before_month(date.month, date.year) + date.day


def decode(count: int) -> Date:
    """Return the ``Date`` whose day count is ``count``. Inverse of ``encode``."""

    # Cycles are anchored at January 1 of year 1 so that each 400-year block ends
    # with its leap century year.
    remaining = count - _YEAR_ONE_START
    n400, remaining = divmod(remaining, DAYS_PER_400_YEARS)
    n100, remaining = divmod(remaining, DAYS_PER_100_YEARS)
    n4, remaining = divmod(remaining, DAYS_PER_4_YEARS)
    n1, remaining = divmod(remaining, DAYS_PER_YEAR)
    year = 1 + 400 * n400 + 100 * n100 + 4 * n4 + n1

    if n100 == 4 or n1 == 4:
        # The closing leap day of a 400-year or 4-year block.
        return Date(12, 31, year - 1)

    month = 1
    day = remaining + 1
    while day > days_in_month(month, year):
        day -= days_in_month(month, year)
        month += 1
    return Date(month, day, year)


def days_between(first: Date, second: Date) -> int:
    return abs(encode(first) - encode(second))


def shift_by_days(date: Date, days: int) -> Date:
    """Return the date ``days`` days after ``date`` (before it when negative)."""

    return decode(encode(date) + days)


__all__ = [
    "DAYS_PER_100_YEARS",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_YEAR",
    "days_between",
    "decode",
    "encode",
    "shift_by_days",
]
