"""To-do events: a scheduled window of days and an optional completion date."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from todolist.domain.day_count import days_between, shift_by_days
from todolist.domain.entity import Entity
from todolist.domain.errors import InvalidRangeError

if TYPE_CHECKING:
    from todolist.domain.dates import Date


@dataclass(eq=False, kw_only=True)
class Event(Entity):
    """Something the user plans to do over at least one day.

    Invariant: ``begin_date <= end_date``. It is checked at construction and by
    every method that changes either bound; a rejected change leaves the event
    untouched. The completion date is independent of the scheduled window.
    """

    title: str
    _begin_date: Date
    _end_date: Date
    _finished_date: Date | None = None

    def __post_init__(self) -> None:
        _ensure_ordered(self._begin_date, self._end_date)

    @classmethod
    def scheduled(cls, begin_date: Date, end_date: Date, title: str) -> Event:
        return cls(title=title, _begin_date=begin_date, _end_date=end_date)

    @property
    def begin_date(self) -> Date:
        return self._begin_date

    @property
    def end_date(self) -> Date:
        return self._end_date

    @property
    def finished_date(self) -> Date | None:
        return self._finished_date

    @property
    def is_finished(self) -> bool:
        return self._finished_date is not None

    @property
    def latest_showing_date(self) -> Date:
        """Last day the event is listed: an early completion cuts the window short."""
        if self._finished_date is not None and self._finished_date <= self._end_date:
            return self._finished_date
        return self._end_date

    def is_overdue(self, as_of: Date) -> bool:
        return as_of > self._end_date and self._finished_date is None

    def is_visible_on(self, day: Date) -> bool:
        return self._begin_date <= day <= self.latest_showing_date

    def mark_finished(self, on: Date) -> None:
        self._finished_date = on

    def mark_unfinished(self) -> None:
        self._finished_date = None

    def rename(self, title: str) -> None:
        self.title = title

    def reschedule(self, *, begin_date: Date | None = None, end_date: Date | None = None) -> None:
        """Replace either bound; raises ``InvalidRangeError`` if the result is inverted."""

        new_begin = self._begin_date if begin_date is None else begin_date
        new_end = self._end_date if end_date is None else end_date
        _ensure_ordered(new_begin, new_end)
        self._begin_date = new_begin
        self._end_date = new_end

    def move_begin_date(self, begin_date: Date) -> None:
        """Set the begin date, pushing the end date forward by the same distance
        when the new begin would otherwise fall after it."""

        end_date = self._end_date
        if begin_date > end_date:
            end_date = shift_by_days(end_date, days_between(self._begin_date, begin_date))
        self.reschedule(begin_date=begin_date, end_date=end_date)

    def move_end_date(self, end_date: Date) -> None:
        """Mirror of ``move_begin_date``: pulls the begin date back when needed."""

        begin_date = self._begin_date
        if end_date < begin_date:
            begin_date = shift_by_days(begin_date, -days_between(self._end_date, end_date))
        self.reschedule(begin_date=begin_date, end_date=end_date)

    def __str__(self) -> str:
        return self.title


def _ensure_ordered(begin_date: Date, end_date: Date) -> None:
    if begin_date > end_date:
        raise InvalidRangeError(begin_date, end_date)


__all__ = ["Event"]
