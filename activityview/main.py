from fastapi import FastAPI

from activityview.api.routes.layout import router
from activityview.core.observability import configure_logging
from activityview.core.observability import init_sentry
from activityview.settings import Settings


def create_app() -> FastAPI:
    """Build the FastAPI application with logging and Sentry configured."""

    settings = Settings()
    configure_logging(settings)
    init_sentry(settings)

    app = FastAPI(title="activityview")
    app.include_router(router)
    return app


app = create_app()
