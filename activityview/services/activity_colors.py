from collections.abc import Mapping
from datetime import date
from datetime import datetime

from activityview.models import Color
from activityview.models import ColorStops
from activityview.services.calendar_window import as_day


def day_key(day: date | datetime) -> int:
    """Return the canonical integer index of a calendar day."""

    return as_day(day).toordinal()


def index_activities(activities: Mapping[date, int]) -> dict[int, int]:
    """Key activity counts by day index, summing entries that share a day."""

    indexed: dict[int, int] = {}
    for day, count in activities.items():
        key = day_key(day)
        indexed[key] = indexed.get(key, 0) + count
    return indexed


def max_activity_count(indexed: Mapping[int, int]) -> int:
    """Return the highest daily count, or 1 for an empty map."""

    return max(indexed.values(), default=1)


def interpolate_color(start: Color, end: Color, fraction: float) -> Color:
    """Blend two colors channel by channel, alpha included."""

    fraction = min(max(fraction, 0.0), 1.0)

    def blend(a: int, b: int) -> int:
        return round(a + (b - a) * fraction)

    return Color(
        r=blend(start.r, end.r),
        g=blend(start.g, end.g),
        b=blend(start.b, end.b),
        a=blend(start.a, end.a),
    )


def color_for_count(count: int, max_count: int, stops: ColorStops) -> Color:
    """Map a daily count to a color given the busiest day's count."""

    if count <= 0:
        return stops.no_activity
    if max_count <= 0:
        return stops.max
    return interpolate_color(stops.min, stops.max, count / max_count)


def color_for(
    activities: Mapping[date, int],
    day: date | datetime,
    no_activity: Color,
    min_color: Color,
    max_color: Color,
) -> Color:
    """Return the color for `day`, matching keys by calendar day.

    Missing days and days with a count of 0 get `no_activity`. Other days are
    interpolated between `min_color` and `max_color` by count / max count.
    """

    indexed = index_activities(activities)
    return color_for_count(
        indexed.get(day_key(day), 0),
        max_activity_count(indexed),
        ColorStops(no_activity=no_activity, min=min_color, max=max_color),
    )
