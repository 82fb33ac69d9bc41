import logging
from typing import Optional

from fastapi import FastAPI

from light_exporter.config import Settings, settings as default_settings
from light_exporter.logging import configure_logging
from light_exporter.middleware.request_id import RequestIdMiddleware

from light_exporter.api.health import router as health_router
from light_exporter.observability.metrics_route import router as metrics_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    configure_logging(settings)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings

    app.add_middleware(RequestIdMiddleware)

    app.include_router(health_router)
    app.include_router(metrics_router)

    if settings.uses_mock:
        logger.info("App initialized, upstream=mock file %s", settings.mock)
    else:
        logger.info("App initialized, upstream=%s", settings.target)
    return app
