"""The calendar date value type.

``Date`` is a plain (month, day, year) triple on the proleptic Gregorian
calendar. Years are unbounded in both directions, so ``datetime.date`` (years
1..9999) is only used as a bridge at the application edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR
from datetime import date as python_date
from functools import total_ordering

from todolist.domain.calendar_rules import is_valid_date
from todolist.domain.enums import DateFormat, Ordering
from todolist.domain.errors import InvalidDateError


@total_ordering
@dataclass(frozen=True, slots=True)
class Date:
    month: int
    day: int
    year: int

    def __post_init__(self) -> None:
        if not is_valid_date(self.month, self.day, self.year):
            raise InvalidDateError(self.month, self.day, self.year)

    @classmethod
    def from_python(cls, value: python_date) -> Date:
        return cls(value.month, value.day, value.year)

    def to_python(self) -> python_date:
        if not MINYEAR <= self.year <= MAXYEAR:
            raise ValueError(f"Year {self.year} is outside the range of datetime.date")
        return python_date(self.year, self.month, self.day)

    @property
    def sort_key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.sort_key < other.sort_key

    def to_text(self, date_format: DateFormat) -> str:
        """Render the date with ``/`` between fields in the order ``date_format`` names.

        The year is written in full, so it must fit within the interpreter's
        integer digit limit (``sys.get_int_max_str_digits``).
        """

        match date_format:
            case DateFormat.DMY:
                return f"{self.day}/{self.month}/{self.year}"
            case DateFormat.MDY:
                return f"{self.month}/{self.day}/{self.year}"
            case DateFormat.YMD:
                return f"{self.year}/{self.month}/{self.day}"

    def __str__(self) -> str:
        return self.to_text(DateFormat.YMD)


def compare(a: Date, b: Date) -> Ordering:
    """Chronological three-way comparison."""

    if a.sort_key < b.sort_key:
        return Ordering.BEFORE
    if a.sort_key > b.sort_key:
        return Ordering.AFTER
    return Ordering.EQUAL


__all__ = ["Date", "compare"]
