"""Public domain surface: calendar engine and events."""

from __future__ import annotations

from todolist.domain.agenda import events_visible_on, overdue_events, status_of
from todolist.domain.calendar_rules import days_in_month, is_leap_year, is_valid_date
from todolist.domain.date_text import DEFAULT_SEPARATORS, parse_date
from todolist.domain.dates import Date, compare
from todolist.domain.day_count import days_between, decode, encode, shift_by_days
from todolist.domain.enums import DateFormat, EventStatus, Ordering
from todolist.domain.errors import (
    CalendarError,
    InvalidDateError,
    InvalidMonthError,
    InvalidRangeError,
)
from todolist.domain.events import Event

__all__ = [  # noqa: RUF022
    # calendar rules
    "days_in_month",
    "is_leap_year",
    "is_valid_date",
    # dates
    "Date",
    "compare",
    "days_between",
    "decode",
    "encode",
    "shift_by_days",
    "DEFAULT_SEPARATORS",
    "parse_date",
    # events
    "Event",
    "events_visible_on",
    "overdue_events",
    "status_of",
    # enums
    "DateFormat",
    "EventStatus",
    "Ordering",
    # errors
    "CalendarError",
    "InvalidDateError",
    "InvalidMonthError",
    "InvalidRangeError",
]
