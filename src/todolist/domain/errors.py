"""Domain error definitions."""

from __future__ import annotations


class CalendarError(ValueError):
    """Base class for rejected calendar values."""


class InvalidMonthError(CalendarError):
    """Raised when a month outside 1..12 reaches a rule that needs a real month."""

    def __init__(self, month: int) -> None:
        super().__init__(f"Invalid month: {month} (expected 1..12)")
        self.month = month


class InvalidDateError(CalendarError):
    """Raised when a (month, day, year) triple does not exist on the calendar."""

    def __init__(self, month: int, day: int, year: int) -> None:
        super().__init__(f"Invalid date: month={month}, day={day}, year={year}")
        self.month = month
        self.day = day
        self.year = year


class InvalidRangeError(CalendarError):
    """Raised when an event would begin after it ends."""

    def __init__(self, begin_date: object, end_date: object) -> None:
        super().__init__(f"Begin date {begin_date} is after end date {end_date}")
        self.begin_date = begin_date
        self.end_date = end_date
