from __future__ import annotations

from hypothesis import strategies as st

from todolist.domain.calendar_rules import days_in_month
from todolist.domain.dates import Date
from todolist.domain.enums import DateFormat

years = st.integers(min_value=-100_000, max_value=100_000)
day_counts = st.integers(min_value=-40_000_000, max_value=40_000_000)
date_formats = st.sampled_from(list(DateFormat))


@st.composite
def valid_dates(draw: st.DrawFn, year_strategy: st.SearchStrategy[int] = years) -> Date:
    year = draw(year_strategy)
    month = draw(st.integers(min_value=1, max_value=12))
    day = draw(st.integers(min_value=1, max_value=days_in_month(month, year)))
    return Date(month, day, year)
