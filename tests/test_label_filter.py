import pytest

from activityview.models import MonthMarker
from activityview.services.errors import InvalidArgumentError
from activityview.services.label_filter import filter_overlapping
from activityview.services.label_filter import has_overlap
from activityview.services.label_filter import label_left_edge
from activityview.services.label_filter import thin_labels


NARROW_WIDTHS = [20] * 12
YEAR_OF_MARKERS = [
    MonthMarker(month=month % 12, week_index=week)
    for month, week in zip(range(10, 23), [0, 1, 5, 9, 14, 18, 22, 27, 31, 35, 40, 44, 48])
]


def test_label_left_edge_centers_two_columns_right_of_week() -> None:
    marker = MonthMarker(month=3, week_index=4)
    widths = [0] * 12
    widths[3] = 31

    # center = (4 + 2) * (13 + 2) = 90, left = 90 - 31 // 2
    assert label_left_edge(marker, box_size=13, gutter=2, label_widths=widths) == 75


@pytest.mark.parametrize(
    "markers",
    [[], [MonthMarker(9, 0)], [MonthMarker(9, 0), MonthMarker(10, 4)]],
)
def test_filter_overlapping_returns_empty_for_two_or_fewer(
    markers: list[MonthMarker],
) -> None:
    assert filter_overlapping(markers, 13, 2, NARROW_WIDTHS) == []


def test_filter_overlapping_drops_edge_markers_when_labels_fit() -> None:
    result = filter_overlapping(YEAR_OF_MARKERS, 13, 2, NARROW_WIDTHS)

    assert result == YEAR_OF_MARKERS[1:-1]


def test_filter_overlapping_keeps_every_second_label_when_crowded() -> None:
    # Each label is 80px wide, months are ~4 weeks (60px) apart.
    result = filter_overlapping(YEAR_OF_MARKERS, 13, 2, [80] * 12)

    assert result == YEAR_OF_MARKERS[1:-1][::2]
    assert not has_overlap(result, 13, 2, [80] * 12)


def test_thin_labels_returns_last_candidate_when_nothing_fits() -> None:
    """A lone label crossing the left border still counts as overlapping."""

    markers = [MonthMarker(0, 1), MonthMarker(1, 5), MonthMarker(2, 9)]

    result = thin_labels(markers, 13, 2, [200] * 12)

    assert result == [MonthMarker(0, 1)]
    assert has_overlap(result, 13, 2, [200] * 12)


def test_has_overlap_treats_touching_labels_as_overlap() -> None:
    # Left edges at 30 - 10 = 20 and 60 - 10 = 50; the first ends at 40.
    markers = [MonthMarker(0, 0), MonthMarker(1, 2)]
    assert not has_overlap(markers, 10, 5, [20] * 12)

    widths = [20] * 12
    widths[0] = 60
    # First label now spans 0..60, touching the left border.
    assert has_overlap(markers, 10, 5, widths)


@pytest.mark.parametrize("width", [10, 40, 80, 120, 300])
def test_thin_labels_is_idempotent(width: int) -> None:
    widths = [width] * 12
    interior = YEAR_OF_MARKERS[1:-1]

    once = thin_labels(interior, 13, 2, widths)

    assert thin_labels(once, 13, 2, widths) == once


def test_filter_overlapping_requires_twelve_widths() -> None:
    with pytest.raises(InvalidArgumentError):
        filter_overlapping(YEAR_OF_MARKERS, 13, 2, [20] * 11)
