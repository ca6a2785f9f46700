from datetime import date
from datetime import datetime
from datetime import timedelta

from activityview.models import MonthMarker
from activityview.services.calendar_window import as_day
from activityview.services.errors import InvalidArgumentError


def build_month_markers(
    first_day: date | datetime, last_day: date | datetime
) -> list[MonthMarker]:
    """Map each month in the range to the week index where it first appears.

    Months are 0-based (January is 0). Week indexes count Monday-to-Sunday
    weeks from `first_day`, which must be a Monday.

    Raises:
        InvalidArgumentError: If `first_day` is not a Monday or is after
            `last_day`.
    """

    first_day = as_day(first_day)
    last_day = as_day(last_day)

    if first_day.weekday() != 0:
        raise InvalidArgumentError("first_day must be a Monday")
    if first_day > last_day:
        raise InvalidArgumentError("first_day must not be after last_day")

    week_index = 0
    current_month = first_day.month
    markers = [MonthMarker(month=current_month - 1, week_index=week_index)]

    current_day = first_day
    while current_day <= last_day:
        if current_day.month != current_month:
            current_month = current_day.month
            markers.append(MonthMarker(month=current_month - 1, week_index=week_index))

        current_day += timedelta(days=1)
        if current_day.weekday() == 0:
            week_index += 1

    return markers
