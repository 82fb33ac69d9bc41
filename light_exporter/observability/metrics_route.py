import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from light_exporter.config import Settings
from light_exporter.errors import UpstreamError
from light_exporter.logging import current_request_id, request_id_scope
from light_exporter.observability.exposition import CONTENT_TYPE, render_light_metrics
from light_exporter.upstream.fetch import call_api

router = APIRouter()
logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _upstream_label(settings: Settings) -> str:
    return f"mock file {settings.mock}" if settings.uses_mock else settings.target


@router.get("/metrics")
def metrics(request: Request, settings: Settings = Depends(get_settings)) -> PlainTextResponse:
    """
    Scrape the controller and expose per-channel brightness.

    Every call fetches and parses afresh. Fetch/parse failures become a 500
    whose body is the error message.
    """
    # runs in the threadpool; rebind the id so scrape logs are tagged with it
    rid = getattr(request.state, "request_id", None) or current_request_id()

    with request_id_scope(rid):
        try:
            statuses = call_api(settings)
        except UpstreamError as e:
            logger.warning("Scrape of %s failed: %s", _upstream_label(settings), e)
            return PlainTextResponse(str(e), status_code=500)

        logger.debug("Scraped %d light(s) from %s", len(statuses), _upstream_label(settings))

    return PlainTextResponse(render_light_metrics(statuses), media_type=CONTENT_TYPE)
