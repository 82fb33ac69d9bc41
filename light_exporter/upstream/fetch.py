from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import httpx

from light_exporter.config import Settings
from light_exporter.errors import FetchError
from light_exporter.parsing.lightvalue import LightStatus, parse_api_response

logger = logging.getLogger(__name__)


def _read_mock(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FetchError(f"failed to read mock response file {path}: {e}") from e


def _http_get(url: str, client: Optional[httpx.Client]) -> bytes:
    # status code is not checked: whatever the controller returns goes to the parser
    try:
        if client is None:
            resp = httpx.get(url, follow_redirects=True)
        else:
            resp = client.get(url, follow_redirects=True)
    except httpx.HTTPError as e:
        raise FetchError(f"failed to get {url}: {e}") from e

    return resp.content


def fetch_upstream(settings: Settings, client: Optional[httpx.Client] = None) -> bytes:
    """
    Read the raw controller response.

    The source is chosen by `settings.mock`: a non-empty path means read that
    file, otherwise GET `settings.target`. `client` lets callers supply their
    own httpx.Client (tests use a MockTransport).
    """
    if settings.uses_mock:
        logger.debug("Reading mock response from %s", settings.mock)
        return _read_mock(settings.mock)

    logger.debug("Fetching %s", settings.target)
    return _http_get(settings.target, client)


def call_api(settings: Settings, client: Optional[httpx.Client] = None) -> List[LightStatus]:
    return parse_api_response(fetch_upstream(settings, client=client))
