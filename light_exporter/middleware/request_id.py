import logging
import uuid

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from light_exporter.logging import request_id_scope

logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id (inbound X-Request-Id or a fresh uuid4).

    Log lines emitted while serving the request carry the id, and it is
    echoed back on the response. Anything that escapes a route is logged
    here and turned into a bare 500.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        rid = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        request.state.request_id = rid

        with request_id_scope(rid):
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled error")
                response = PlainTextResponse("Internal server error", status_code=500)

        response.headers["X-Request-Id"] = rid
        return response
