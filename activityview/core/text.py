import math
from functools import lru_cache

from PIL import ImageFont

from activityview.models import TextSize


class PillowTextMeasurer:
    """Measure label text with a Pillow font.

    Uses the TrueType font at `font_path` when given, otherwise Pillow's
    bundled default font.
    """

    def __init__(self, font_path: str | None = None) -> None:
        self.font_path = font_path

    def __call__(self, text: str, font_size: float) -> TextSize:
        font = _load_font(self.font_path, font_size)
        left, _top, right, bottom = font.getbbox(text)
        return TextSize(width=math.ceil(right - left), height=math.ceil(bottom))


@lru_cache(maxsize=32)
def _load_font(
    font_path: str | None, font_size: float
) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    if font_path:
        return ImageFont.truetype(font_path, size=font_size)
    return ImageFont.load_default(size=font_size)
