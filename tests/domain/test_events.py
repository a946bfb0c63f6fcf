from __future__ import annotations

import pytest

from tests.helpers.events import make_event
from todolist.domain.dates import Date
from todolist.domain.errors import InvalidRangeError
from todolist.domain.events import Event

TODAY = Date(6, 15, 2024)


def test_event_rejects_begin_after_end() -> None:
    with pytest.raises(InvalidRangeError) as exc:
        Event.scheduled(Date(6, 20, 2024), Date(6, 10, 2024), "x")

    assert exc.value.begin_date == Date(6, 20, 2024)
    assert exc.value.end_date == Date(6, 10, 2024)


def test_event_allows_single_day_range() -> None:
    event = Event.scheduled(TODAY, TODAY, "Dentist")

    assert event.begin_date == event.end_date == TODAY
    assert event.finished_date is None
    assert str(event) == "Dentist"


def test_events_have_identity_not_value_equality() -> None:
    first = Event.scheduled(TODAY, TODAY, "Same")
    second = Event.scheduled(TODAY, TODAY, "Same")

    assert first != second
    assert first.id != second.id


def test_unfinished_event_past_its_end_is_overdue() -> None:
    event = make_event(begin=Date(6, 1, 2024), end=Date(6, 10, 2024))

    assert event.is_overdue(TODAY)


def test_finished_event_is_never_overdue() -> None:
    event = make_event(begin=Date(6, 1, 2024), end=Date(6, 10, 2024), finished=Date(6, 9, 2024))

    assert not event.is_overdue(TODAY)


def test_event_before_its_end_is_not_overdue() -> None:
    event = make_event(begin=Date(6, 1, 2024), end=Date(6, 20, 2024))

    assert not event.is_overdue(TODAY)
    event.mark_finished(Date(6, 12, 2024))
    assert not event.is_overdue(TODAY)


def test_event_is_not_overdue_on_its_end_date() -> None:
    event = make_event(end=TODAY, begin=Date(6, 1, 2024))

    assert not event.is_overdue(TODAY)


def test_mark_unfinished_clears_completion() -> None:
    event = make_event(begin=Date(6, 1, 2024), end=Date(6, 10, 2024), finished=Date(6, 9, 2024))

    event.mark_unfinished()

    assert event.finished_date is None
    assert not event.is_finished
    assert event.is_overdue(TODAY)


def test_completion_date_outside_the_window_is_accepted() -> None:
    event = make_event(begin=Date(6, 1, 2024), end=Date(6, 10, 2024))

    event.mark_finished(Date(1, 1, 1999))

    assert event.finished_date == Date(1, 1, 1999)


def test_visibility_runs_from_begin_to_end() -> None:
    event = make_event(begin=Date(6, 10, 2024), end=Date(6, 20, 2024))

    assert not event.is_visible_on(Date(6, 9, 2024))
    assert event.is_visible_on(Date(6, 10, 2024))
    assert event.is_visible_on(Date(6, 20, 2024))
    assert not event.is_visible_on(Date(6, 21, 2024))


def test_early_completion_shortens_visibility() -> None:
    event = make_event(begin=Date(6, 10, 2024), end=Date(6, 20, 2024), finished=Date(6, 12, 2024))

    assert event.latest_showing_date == Date(6, 12, 2024)
    assert event.is_visible_on(Date(6, 12, 2024))
    assert not event.is_visible_on(Date(6, 13, 2024))


def test_late_completion_keeps_the_end_date() -> None:
    event = make_event(begin=Date(6, 10, 2024), end=Date(6, 20, 2024), finished=Date(6, 25, 2024))

    assert event.latest_showing_date == Date(6, 20, 2024)
    assert not event.is_visible_on(Date(6, 21, 2024))


def test_reschedule_validates_the_new_range() -> None:
    event = make_event(begin=Date(6, 10, 2024), end=Date(6, 20, 2024))

    with pytest.raises(InvalidRangeError):
        event.reschedule(end_date=Date(6, 1, 2024))

    assert event.begin_date == Date(6, 10, 2024)
    assert event.end_date == Date(6, 20, 2024)

    event.reschedule(begin_date=Date(6, 1, 2024), end_date=Date(6, 5, 2024))
    assert (event.begin_date, event.end_date) == (Date(6, 1, 2024), Date(6, 5, 2024))


def test_move_begin_date_within_range_keeps_end() -> None:
    event = make_event(begin=Date(6, 10, 2024), end=Date(6, 20, 2024))

    event.move_begin_date(Date(6, 15, 2024))

    assert (event.begin_date, event.end_date) == (Date(6, 15, 2024), Date(6, 20, 2024))


def test_move_begin_date_past_end_drags_end_along() -> None:
    event = make_event(begin=Date(2, 27, 2024), end=Date(2, 28, 2024))

    event.move_begin_date(Date(3, 1, 2024))

    # Moved three days forward (leap day included), so the end follows by three.
    assert event.begin_date == Date(3, 1, 2024)
    assert event.end_date == Date(3, 2, 2024)


def test_move_end_date_before_begin_drags_begin_along() -> None:
    event = make_event(begin=Date(1, 2, 2024), end=Date(1, 5, 2024))

    event.move_end_date(Date(12, 30, 2023))

    assert event.begin_date == Date(12, 27, 2023)
    assert event.end_date == Date(12, 30, 2023)


def test_rename_replaces_title() -> None:
    event = make_event("Old")

    event.rename("New")

    assert event.title == "New"
