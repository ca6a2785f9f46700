from collections.abc import Callable
from datetime import date
from datetime import datetime
from datetime import timedelta

from activityview.models import VisibleRange
from activityview.services.errors import InvalidArgumentError


Clock = Callable[[], date | datetime]


def as_day(value: date | datetime) -> date:
    """Normalize a date or datetime to its calendar day."""

    if isinstance(value, datetime):
        return value.date()
    return value


def today(clock: Clock = date.today) -> date:
    """Return the current day from the given clock."""

    return as_day(clock())


def first_visible_day(num_weeks_to_show: int, clock: Clock = date.today) -> date:
    """Return the Monday of the week `num_weeks_to_show - 1` weeks before today."""

    if num_weeks_to_show < 1:
        raise InvalidArgumentError("num_weeks_to_show must be at least 1")

    start = today(clock) - timedelta(weeks=num_weeks_to_show - 1)
    return start - timedelta(days=start.weekday())


def visible_day_count(first: date, last: date) -> int:
    """Return the inclusive number of days from first to last.

    The caller guarantees `first <= last`; an inverted range yields a
    meaningless count.
    """

    return (as_day(last) - as_day(first)).days + 1


def resolve_visible_range(
    num_weeks_to_show: int, clock: Clock = date.today
) -> VisibleRange:
    """Compute the visible window ending today."""

    current_day = today(clock)
    first_day = first_visible_day(num_weeks_to_show, lambda: current_day)
    return VisibleRange(
        first_day=first_day,
        day_count=visible_day_count(first_day, current_day),
    )
