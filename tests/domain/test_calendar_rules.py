from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from todolist.domain.calendar_rules import days_in_month, is_leap_year, is_valid_date
from todolist.domain.errors import InvalidMonthError


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (2000, True),
        (1900, False),
        (2024, True),
        (2023, False),
        (0, True),
        (-4, True),
        (-1, False),
        (-100, False),
        (-400, True),
    ],
)
def test_is_leap_year(year: int, *, expected: bool) -> None:
    assert is_leap_year(year) is expected


def test_days_in_month_for_february() -> None:
    assert days_in_month(2, 2000) == 29
    assert days_in_month(2, 1900) == 28
    assert days_in_month(2, 0) == 29
    assert days_in_month(2, 2023) == 28


def test_days_in_month_for_fixed_length_months() -> None:
    assert [days_in_month(m, 2023) for m in range(1, 13)] == [
        31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
    ]


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_unknown_month(month: int) -> None:
    with pytest.raises(InvalidMonthError, match="Invalid month") as exc:
        days_in_month(month, 2024)

    assert exc.value.month == month


def test_is_valid_date_boundaries() -> None:
    assert is_valid_date(2, 29, 2000)
    assert not is_valid_date(2, 29, 1900)
    assert not is_valid_date(2, 30, 2000)
    assert is_valid_date(12, 31, -7)
    assert not is_valid_date(4, 31, 2024)
    assert not is_valid_date(1, 0, 2024)
    assert not is_valid_date(13, 1, 2024)


@given(
    month=st.integers(min_value=-50, max_value=50),
    day=st.integers(min_value=-50, max_value=50),
    year=st.integers(),
)
def test_is_valid_date_is_total(month: int, day: int, year: int) -> None:
    result = is_valid_date(month, day, year)

    assert result == (1 <= month <= 12 and 1 <= day <= days_in_month(month, year))
