import logging
from collections.abc import Callable
from collections.abc import Mapping
from collections.abc import Sequence
from datetime import date
from datetime import timedelta

from activityview.api.schemas.layout import BoxPlacement
from activityview.api.schemas.layout import LabelPlacement
from activityview.api.schemas.layout import LayoutConfig
from activityview.api.schemas.layout import PlacementPlan
from activityview.models import ColorStops
from activityview.models import Geometry
from activityview.models import MonthMarker
from activityview.models import TextSize
from activityview.models import VisibleRange
from activityview.services.activity_colors import color_for_count
from activityview.services.activity_colors import index_activities
from activityview.services.activity_colors import max_activity_count
from activityview.services.calendar_window import Clock
from activityview.services.calendar_window import resolve_visible_range
from activityview.services.errors import InvalidArgumentError
from activityview.services.label_filter import filter_overlapping
from activityview.services.label_filter import label_left_edge
from activityview.services.month_markers import build_month_markers


logger = logging.getLogger(__name__)

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MIN_NUM_WEEKS_TO_SHOW_MONTH_LABELS = 5
GUTTER_RATIO = 0.2
DAYS_PER_WEEK = 7

TextMeasurer = Callable[[str, float], TextSize]


def compute_geometry(available_width: float, num_weeks_to_show: int) -> Geometry:
    """Derive box size and gutter so all week columns fit the width.

    width = n * box + (n - 1) * gutter, with gutter = 0.2 * box, solved for box.
    """

    if num_weeks_to_show < 1:
        raise InvalidArgumentError("num_weeks_to_show must be at least 1")

    box_size = int(
        available_width / (num_weeks_to_show + (num_weeks_to_show - 1) * GUTTER_RATIO)
    )
    if box_size <= 0:
        raise InvalidArgumentError(
            f"available_width {available_width} is too small for {num_weeks_to_show} weeks"
        )
    return Geometry(box_size=box_size, gutter=int(box_size * GUTTER_RATIO))


def select_month_labels(
    visible: VisibleRange,
    num_weeks_to_show: int,
    geometry: Geometry,
    label_widths: Sequence[int],
) -> list[MonthMarker]:
    """Return the month markers whose labels can be drawn without overlap."""

    if num_weeks_to_show < MIN_NUM_WEEKS_TO_SHOW_MONTH_LABELS:
        return []

    markers = build_month_markers(visible.first_day, visible.last_day)
    return filter_overlapping(
        markers, geometry.box_size, geometry.gutter, label_widths
    )


def layout(
    available_width: float,
    available_height: float,
    num_weeks_to_show: int,
    activities: Mapping[date, int],
    colors: ColorStops,
    label_sizes: Sequence[TextSize],
    visible: VisibleRange,
    box_shape: str = "rectangle",
    font_size: float = 16,
) -> PlacementPlan:
    """Place one box per visible day and the month labels above the grid.

    Boxes fill the grid column by column: one column per week, Monday at
    the top. All labels share one row whose height is the tallest label.
    Label positions follow the collision filter only, so the last label may
    extend past `available_width`.

    Raises:
        InvalidArgumentError: If the grid does not fit `available_height`.
    """

    if len(label_sizes) != len(MONTH_LABELS):
        raise InvalidArgumentError("label_sizes must contain one size per month")

    geometry = compute_geometry(available_width, num_weeks_to_show)
    stride = geometry.stride
    label_widths = [size.width for size in label_sizes]
    label_height = max(size.height for size in label_sizes)

    rows = min(DAYS_PER_WEEK, visible.day_count)
    grid_height = rows * stride - geometry.gutter + label_height
    if grid_height > available_height:
        raise InvalidArgumentError(
            f"available_height {available_height} is too small for a {grid_height}px grid"
        )

    indexed = index_activities(activities)
    max_count = max_activity_count(indexed)

    boxes: list[BoxPlacement] = []
    for i in range(visible.day_count):
        day = visible.first_day + timedelta(days=i)
        column, row = divmod(i, DAYS_PER_WEEK)
        boxes.append(
            BoxPlacement(
                day=day,
                x=column * stride,
                y=row * stride + label_height,
                size=geometry.box_size,
                color=color_for_count(
                    indexed.get(day.toordinal(), 0), max_count, colors
                ),
                shape=box_shape,
            )
        )

    markers = select_month_labels(visible, num_weeks_to_show, geometry, label_widths)
    labels = [
        LabelPlacement(
            month=marker.month,
            text=MONTH_LABELS[marker.month],
            x=label_left_edge(marker, geometry.box_size, geometry.gutter, label_widths),
            y=0,
            font_size=font_size,
        )
        for marker in markers
    ]

    logger.debug(
        "Laid out %d boxes (box_size=%d, gutter=%d) and %d month labels",
        len(boxes),
        geometry.box_size,
        geometry.gutter,
        len(labels),
    )

    return PlacementPlan(
        width=available_width,
        height=available_height,
        first_day=visible.first_day,
        last_day=visible.last_day,
        box_size=geometry.box_size,
        gutter=geometry.gutter,
        label_height=label_height,
        boxes=boxes,
        labels=labels,
    )


def measure_month_labels(
    measure_text: TextMeasurer, font_size: float
) -> list[TextSize]:
    """Measure every month label once with the host's text engine."""

    return [TextSize(*measure_text(label, font_size)) for label in MONTH_LABELS]


def compute_layout(
    config: LayoutConfig,
    measure_text: TextMeasurer,
    clock: Clock = date.today,
) -> PlacementPlan:
    """Build the placement plan for the window ending today."""

    visible = resolve_visible_range(config.num_weeks_to_show, clock)
    return layout(
        available_width=config.available_width,
        available_height=config.available_height,
        num_weeks_to_show=config.num_weeks_to_show,
        activities=config.activities,
        colors=ColorStops(
            no_activity=config.no_activity_color,
            min=config.min_color,
            max=config.max_color,
        ),
        label_sizes=measure_month_labels(measure_text, config.month_label_font_size),
        visible=visible,
        box_shape=config.box_shape,
        font_size=config.month_label_font_size,
    )
