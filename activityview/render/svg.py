"""Paint a placement plan as a standalone SVG document."""

from html import escape

from activityview.api.schemas.layout import BoxPlacement
from activityview.api.schemas.layout import LabelPlacement
from activityview.api.schemas.layout import PlacementPlan


FONT_FAMILY = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif"
LABEL_FILL = "#57606a"
ROUNDED_CORNER_RATIO = 0.2


def _box_element(box: BoxPlacement) -> str:
    fill = f'fill="{box.color.hex}"'
    if box.color.a < 255:
        fill += f' fill-opacity="{box.color.opacity}"'
    title = f"<title>{box.day.isoformat()}</title>"

    if box.shape == "circle":
        radius = box.size / 2
        return (
            f'  <circle cx="{box.x + radius:g}" cy="{box.y + radius:g}" '
            f'r="{radius:g}" {fill}>{title}</circle>'
        )

    corner = ""
    if box.shape == "rounded":
        rx = round(box.size * ROUNDED_CORNER_RATIO, 2)
        corner = f' rx="{rx:g}" ry="{rx:g}"'
    return (
        f'  <rect x="{box.x}" y="{box.y}" width="{box.size}" height="{box.size}"'
        f"{corner} {fill}>{title}</rect>"
    )


def _label_element(label: LabelPlacement) -> str:
    return (
        f'  <text x="{label.x}" y="{label.y}" dominant-baseline="hanging" '
        f'fill="{LABEL_FILL}" font-size="{label.font_size:g}" '
        f'font-family="{escape(FONT_FAMILY)}">{escape(label.text)}</text>'
    )


def render_svg(plan: PlacementPlan) -> str:
    """Return an SVG document with one element per box and label.

    Box shapes `rectangle`, `rounded` and `circle` are drawn as such; any
    other shape token falls back to a plain rectangle.
    """

    width = f"{plan.width:g}"
    height = f"{plan.height:g}"
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    ]
    parts.extend(_label_element(label) for label in plan.labels)
    parts.extend(_box_element(box) for box in plan.boxes)
    parts.append("</svg>")
    return "\n".join(parts)
