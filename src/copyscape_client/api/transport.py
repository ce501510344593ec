"""HTTP transport: one request, one fully read response."""

import logging
import re

import requests

from copyscape_client.api.base import ApiRequest
from copyscape_client.config import ClientSettings
from copyscape_client.errors import TransportError

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}
QUERY_RE = re.compile(r"\?[^\s)]*")


def send(
    request: ApiRequest,
    settings: ClientSettings | None = None,
    session: requests.Session | None = None,
) -> str:
    """Execute ``request`` and return the response body as text.

    A session passed in by the caller is left open; otherwise a session is
    opened for this call only and closed before returning.
    """
    settings = settings or ClientSettings()
    if session is not None:
        return _send(session, request, settings)
    with requests.Session() as own_session:
        return _send(own_session, request, settings)


def _send(session: requests.Session, request: ApiRequest, settings: ClientSettings) -> str:
    logger.debug("Sending %s %s request", request.method, request.operation.value)
    try:
        response = session.request(
            request.method,
            request.url,
            data=request.body,
            headers=HEADERS,
            timeout=(settings.connect_timeout, settings.read_timeout),
        )
        response.raise_for_status()
        content = response.content
    except requests.RequestException as e:
        raise TransportError(_strip_query(str(e))) from e

    try:
        return content.decode(request.encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise TransportError(f"Cannot decode response as {request.encoding}: {e}") from e


def _strip_query(message: str) -> str:
    """Drop query strings from error text so the API key is not logged."""
    return QUERY_RE.sub("?...", message)
