from datetime import date
from typing import NamedTuple

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator


class Color(BaseModel):
    """RGBA color with 8-bit channels."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: int = Field(default=255, ge=0, le=255)

    @model_validator(mode="before")
    @classmethod
    def parse_hex_string(cls, value: object) -> object:
        if isinstance(value, str):
            return cls.from_hex(value).model_dump()
        return value

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse `#rrggbb` or `#rrggbbaa`."""

        raw = value.strip().removeprefix("#")
        if len(raw) not in {6, 8}:
            raise ValueError(f"invalid hex color: {value!r}")
        channels = [int(raw[i : i + 2], 16) for i in range(0, len(raw), 2)]
        alpha = channels[3] if len(channels) == 4 else 255
        return cls(r=channels[0], g=channels[1], b=channels[2], a=alpha)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def opacity(self) -> float:
        return round(self.a / 255, 3)


class ColorStops(NamedTuple):
    no_activity: Color
    min: Color
    max: Color


class VisibleRange(NamedTuple):
    """Inclusive span of rendered days; `first_day` is always a Monday."""

    first_day: date
    day_count: int

    @property
    def last_day(self) -> date:
        return date.fromordinal(self.first_day.toordinal() + self.day_count - 1)


class MonthMarker(NamedTuple):
    """Week column (0-based) where a month (0 = January) first appears."""

    month: int
    week_index: int


class Geometry(NamedTuple):
    box_size: int
    gutter: int

    @property
    def stride(self) -> int:
        return self.box_size + self.gutter


class TextSize(NamedTuple):
    width: int
    height: int
