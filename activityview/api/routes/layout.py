import logging
from datetime import date

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Response

from activityview.api.schemas.layout import LayoutConfig
from activityview.api.schemas.layout import PlacementPlan
from activityview.core.text import PillowTextMeasurer
from activityview.render.svg import render_svg
from activityview.services.calendar_window import Clock
from activityview.services.errors import InvalidArgumentError
from activityview.services.layout_service import TextMeasurer
from activityview.services.layout_service import compute_layout
from activityview.settings import Settings


logger = logging.getLogger(__name__)

router = APIRouter()
settings = Settings()


def get_clock() -> Clock:
    """Return the clock used to resolve "today"."""

    return date.today


def get_text_measurer() -> TextMeasurer:
    """Return the text measurer configured for month labels."""

    return PillowTextMeasurer(settings.label_font_path)


def build_plan(
    config: LayoutConfig,
    measure_text: TextMeasurer,
    clock: Clock,
) -> PlacementPlan:
    try:
        return compute_layout(config, measure_text=measure_text, clock=clock)
    except InvalidArgumentError as exc:
        logger.warning("Rejected layout request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.post("/layout")
def create_layout(
    config: LayoutConfig,
    measure_text: TextMeasurer = Depends(get_text_measurer),
    clock: Clock = Depends(get_clock),
) -> PlacementPlan:
    """Return the placement plan for the requested activity view."""

    return build_plan(config, measure_text, clock)


@router.post("/layout/svg")
def create_layout_svg(
    config: LayoutConfig,
    measure_text: TextMeasurer = Depends(get_text_measurer),
    clock: Clock = Depends(get_clock),
) -> Response:
    """Return the activity view rendered as SVG."""

    plan = build_plan(config, measure_text, clock)
    return Response(content=render_svg(plan), media_type="image/svg+xml")
