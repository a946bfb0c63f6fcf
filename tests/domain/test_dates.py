from __future__ import annotations

from datetime import date as python_date

import pytest

from todolist.domain.dates import Date, compare
from todolist.domain.enums import DateFormat, Ordering
from todolist.domain.errors import InvalidDateError


def test_date_rejects_invalid_triples() -> None:
    with pytest.raises(InvalidDateError) as exc:
        Date(2, 30, 2000)

    assert (exc.value.month, exc.value.day, exc.value.year) == (2, 30, 2000)

    with pytest.raises(InvalidDateError):
        Date(13, 1, 2024)
    with pytest.raises(InvalidDateError):
        Date(2, 29, 1900)


def test_date_accepts_year_zero_and_negative_years() -> None:
    assert Date(2, 29, 0).year == 0
    assert Date(2, 29, -4).year == -4


def test_date_is_an_immutable_value() -> None:
    value = Date(6, 15, 2024)

    with pytest.raises(AttributeError):
        value.day = 16  # type: ignore[misc]
    assert value == Date(6, 15, 2024)
    assert hash(value) == hash(Date(6, 15, 2024))
    assert len({value, Date(6, 15, 2024)}) == 1


def test_date_orders_by_year_then_month_then_day() -> None:
    dates = [Date(1, 31, 2024), Date(12, 1, 2023), Date(2, 1, 2024), Date(1, 1, -1)]

    assert sorted(dates) == [Date(1, 1, -1), Date(12, 1, 2023), Date(1, 31, 2024), Date(2, 1, 2024)]
    assert Date(12, 31, 2023) < Date(1, 1, 2024)
    assert Date(1, 1, 2024) >= Date(1, 1, 2024)


def test_compare_returns_ordering() -> None:
    assert compare(Date(6, 10, 2024), Date(6, 15, 2024)) is Ordering.BEFORE
    assert compare(Date(6, 15, 2024), Date(6, 15, 2024)) is Ordering.EQUAL
    assert compare(Date(7, 1, 2024), Date(6, 15, 2024)) is Ordering.AFTER


@pytest.mark.parametrize(
    ("date_format", "expected"),
    [
        (DateFormat.DMY, "1/3/2024"),
        (DateFormat.MDY, "3/1/2024"),
        (DateFormat.YMD, "2024/3/1"),
    ],
)
def test_to_text_orders_fields(date_format: DateFormat, expected: str) -> None:
    assert Date(3, 1, 2024).to_text(date_format) == expected


def test_to_text_keeps_negative_years() -> None:
    assert Date(3, 1, -44).to_text(DateFormat.MDY) == "3/1/-44"


def test_python_date_bridge() -> None:
    assert Date.from_python(python_date(2024, 6, 15)) == Date(6, 15, 2024)
    assert Date(6, 15, 2024).to_python() == python_date(2024, 6, 15)

    with pytest.raises(ValueError, match="outside the range"):
        Date(1, 1, 0).to_python()
