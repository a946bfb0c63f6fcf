"""Proleptic Gregorian calendar rules, extended to year 0 and negative years."""

from __future__ import annotations

from typing import Final

from todolist.domain.errors import InvalidMonthError

_LONG_MONTHS: Final[frozenset[int]] = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS: Final[frozenset[int]] = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    # Python's % floors, so the rule holds unchanged for year 0 and below.
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    raise InvalidMonthError(month)


def is_valid_date(month: int, day: int, year: int) -> bool:
    """Return whether the triple names a real day. Never raises."""

    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(month, year)


__all__ = ["days_in_month", "is_leap_year", "is_valid_date"]
