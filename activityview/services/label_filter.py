from collections.abc import Sequence

from activityview.models import MonthMarker
from activityview.services.errors import InvalidArgumentError


# Labels sit two columns right of the month's first week to roughly center
# them over the month.
LABEL_WEEK_OFFSET = 2


def label_left_edge(
    marker: MonthMarker, box_size: int, gutter: int, label_widths: Sequence[int]
) -> int:
    """Return the x coordinate where the marker's label starts."""

    center = (marker.week_index + LABEL_WEEK_OFFSET) * (box_size + gutter)
    return center - label_widths[marker.month] // 2


def has_overlap(
    markers: Sequence[MonthMarker],
    box_size: int,
    gutter: int,
    label_widths: Sequence[int],
) -> bool:
    """Check left-to-right whether any label starts at or before the previous one ends.

    The running right edge starts at 0, so a label touching the left border
    counts as an overlap too.
    """

    previous_end = 0
    for marker in markers:
        left = label_left_edge(marker, box_size, gutter, label_widths)
        if left <= previous_end:
            return True
        previous_end = left + label_widths[marker.month]
    return False


def thin_labels(
    markers: Sequence[MonthMarker],
    box_size: int,
    gutter: int,
    label_widths: Sequence[int],
) -> list[MonthMarker]:
    """Keep every n-th marker for the smallest n that avoids overlap.

    When no step below the marker count works, the last candidate (a single
    marker) is returned even if it still overlaps.
    """

    _check_label_widths(label_widths)
    markers = list(markers)

    step = 1
    candidate = markers
    while step < len(markers):
        if not has_overlap(candidate, box_size, gutter, label_widths):
            break
        step += 1
        candidate = markers[::step]
    return candidate


def filter_overlapping(
    markers: Sequence[MonthMarker],
    box_size: int,
    gutter: int,
    label_widths: Sequence[int],
) -> list[MonthMarker]:
    """Drop the edge markers and thin the rest until labels fit side by side.

    The first and last markers may be clipped at the grid edges, so they are
    never shown. Two or fewer markers leave nothing to show.
    """

    _check_label_widths(label_widths)
    if len(markers) <= 2:
        return []
    return thin_labels(markers[1:-1], box_size, gutter, label_widths)


def _check_label_widths(label_widths: Sequence[int]) -> None:
    if len(label_widths) != 12:
        raise InvalidArgumentError("label_widths must contain one width per month")
