from collections.abc import Mapping
from datetime import date
from datetime import datetime

from pydantic import BaseModel
from pydantic import Field
from pydantic import NonNegativeInt
from pydantic import field_validator

from activityview.models import Color
from activityview.services.calendar_window import as_day


class LayoutConfig(BaseModel):
    """Options for one layout pass of the activity view."""

    num_weeks_to_show: int = Field(default=52, ge=1)
    no_activity_color: Color = Color(r=236, g=236, b=236, a=255)
    min_color: Color = Color(r=194, g=245, b=185, a=255)
    max_color: Color = Color(r=65, g=216, b=60, a=255)
    box_shape: str = "rectangle"
    month_label_font_size: float = Field(default=16, gt=0)
    activities: dict[date, NonNegativeInt] = Field(default_factory=dict)
    available_width: float = Field(ge=0)
    available_height: float = Field(ge=0)

    @field_validator("activities", mode="before")
    @classmethod
    def normalize_activity_days(cls, value: object) -> object:
        """Key counts by calendar day, summing instants that share a day."""

        if not isinstance(value, Mapping):
            return value

        normalized: dict[object, object] = {}
        for key, count in value.items():
            day = _activity_day(key)
            if day in normalized:
                normalized[day] = normalized[day] + count
            else:
                normalized[day] = count
        return normalized


def _activity_day(key: object) -> object:
    if isinstance(key, date):
        return as_day(key)
    if isinstance(key, str):
        try:
            return datetime.fromisoformat(key).date()
        except ValueError:
            return key
    return key


class BoxPlacement(BaseModel):
    """Positioned activity box for a single day."""

    day: date
    x: int
    y: int
    size: int
    color: Color
    shape: str


class LabelPlacement(BaseModel):
    """Positioned month label; `x`/`y` is the label's top-left corner."""

    month: int
    text: str
    x: int
    y: int
    font_size: float


class PlacementPlan(BaseModel):
    """Renderer-ready boxes and labels for one layout pass."""

    width: float
    height: float
    first_day: date
    last_day: date
    box_size: int
    gutter: int
    label_height: int
    boxes: list[BoxPlacement]
    labels: list[LabelPlacement]
