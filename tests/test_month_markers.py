from datetime import date
from datetime import datetime
from datetime import timedelta

import pytest

from activityview.models import MonthMarker
from activityview.services.errors import InvalidArgumentError
from activityview.services.month_markers import build_month_markers


def test_build_month_markers_rejects_first_day_not_monday() -> None:
    """A Tuesday start is rejected regardless of the end of the range."""

    first_day = date(2022, 10, 4)
    assert first_day.weekday() == 1

    with pytest.raises(InvalidArgumentError):
        build_month_markers(first_day, date(2022, 11, 8))


def test_build_month_markers_rejects_first_day_after_last_day() -> None:
    with pytest.raises(InvalidArgumentError):
        build_month_markers(date(2022, 10, 3), date(2022, 10, 2))


def test_build_month_markers_single_day_returns_first_month() -> None:
    markers = build_month_markers(date(2022, 10, 3), date(2022, 10, 3))

    assert markers == [MonthMarker(month=9, week_index=0)]


def test_build_month_markers_same_month_returns_one_marker() -> None:
    markers = build_month_markers(date(2022, 10, 3), date(2022, 10, 31))

    assert markers == [(9, 0)]


def test_build_month_markers_month_change_uses_week_of_first_day() -> None:
    """November 1st 2022 is a Tuesday in the fifth visible week."""

    markers = build_month_markers(date(2022, 10, 3), date(2022, 11, 20))

    assert markers == [(9, 0), (10, 4)]


def test_build_month_markers_month_starting_on_monday() -> None:
    """August 1st 2022 is a Monday, the first day of week 1."""

    markers = build_month_markers(date(2022, 7, 25), date(2022, 8, 7))

    assert markers == [(6, 0), (7, 1)]


def test_build_month_markers_normalizes_datetimes() -> None:
    markers = build_month_markers(
        datetime(2022, 10, 3, 18, 30), datetime(2022, 11, 20, 1, 0)
    )

    assert markers == [(9, 0), (10, 4)]


def test_build_month_markers_first_week_spanning_two_months_shares_week_zero() -> None:
    """January 1st 2023 is the Sunday of the first visible week."""

    markers = build_month_markers(date(2022, 12, 26), date(2023, 2, 5))

    assert markers == [(11, 0), (0, 0), (1, 5)]


@pytest.mark.parametrize("num_days", [1, 6, 7, 30, 95, 364, 400])
def test_build_month_markers_one_marker_per_month_transition(num_days: int) -> None:
    first_day = date(2021, 3, 1)
    last_day = first_day + timedelta(days=num_days - 1)

    markers = build_month_markers(first_day, last_day)

    week_indexes = [marker.week_index for marker in markers]
    assert week_indexes[0] == 0
    assert all(a < b for a, b in zip(week_indexes, week_indexes[1:]))

    expected_months: list[int] = []
    day = first_day
    while day <= last_day:
        if not expected_months or expected_months[-1] != day.month - 1:
            expected_months.append(day.month - 1)
        day += timedelta(days=1)
    assert [marker.month for marker in markers] == expected_months
