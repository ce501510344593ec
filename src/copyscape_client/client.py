"""Copyscape Premium API client.

Every public method returns an ApiResult. Local failures (encoding,
network, HTTP status, malformed XML) are logged and come back as an empty
result; errors reported by the API come back as a tree with an ``error``
element. A negative ``full`` count is a caller bug and raises ValueError
before any request is made.
"""

import logging
from collections.abc import Mapping

import requests

from copyscape_client.api.base import Operation, SearchIndex
from copyscape_client.api.request import build_request
from copyscape_client.api.transport import send
from copyscape_client.config import ClientSettings, Credentials
from copyscape_client.errors import RequestBuildError, ResponseParseError, TransportError
from copyscape_client.response.parser import parse_response
from copyscape_client.response.result import ApiResult

logger = logging.getLogger(__name__)


class CopyscapeClient:
    """Thin wrapper mapping API actions onto HTTP calls."""

    def __init__(
        self,
        credentials: Credentials,
        settings: ClientSettings | None = None,
        session: requests.Session | None = None,
    ):
        self.credentials = credentials
        self.settings = settings or ClientSettings()
        self.session = session

    # Searches (all accounts)

    def url_search_internet(self, url: str, full: int = 0) -> ApiResult:
        return self._url_search(url, full, Operation.INTERNET_SEARCH)

    def text_search_internet(self, text: str, encoding: str | None, full: int = 0) -> ApiResult:
        return self._text_search(text, encoding, full, Operation.INTERNET_SEARCH)

    def check_balance(self) -> ApiResult:
        return self.call(Operation.BALANCE)

    # Private index (accounts with private index enabled)

    def url_search_private(self, url: str, full: int = 0) -> ApiResult:
        return self._url_search(url, full, Operation.PRIVATE_SEARCH)

    def url_search_internet_and_private(self, url: str, full: int = 0) -> ApiResult:
        return self._url_search(url, full, Operation.COMBINED_SEARCH)

    def text_search_private(self, text: str, encoding: str | None, full: int = 0) -> ApiResult:
        return self._text_search(text, encoding, full, Operation.PRIVATE_SEARCH)

    def text_search_internet_and_private(self, text: str, encoding: str | None, full: int = 0) -> ApiResult:
        return self._text_search(text, encoding, full, Operation.COMBINED_SEARCH)

    def url_add_to_private(self, url: str, id: str | None = None) -> ApiResult:
        params = {"q": url}
        if id is not None:
            params["i"] = id
        return self.call(Operation.PRIVATE_ADD, params)

    def text_add_to_private(
        self,
        text: str,
        encoding: str | None,
        title: str | None = None,
        id: str | None = None,
    ) -> ApiResult:
        encoding = encoding or self.settings.encoding
        params = {"e": encoding}
        if title is not None:
            params["a"] = title
        if id is not None:
            params["i"] = id
        return self.call(Operation.PRIVATE_ADD, params, body=text, encoding=encoding)

    def delete_from_private(self, handle: str) -> ApiResult:
        return self.call(Operation.PRIVATE_DELETE, {"h": handle})

    # Dispatch by index, used by the CLI

    def search_url(self, url: str, index: SearchIndex = SearchIndex.INTERNET, full: int = 0) -> ApiResult:
        return self._url_search(url, full, SearchIndex(index).operation)

    def search_text(
        self,
        text: str,
        encoding: str,
        index: SearchIndex = SearchIndex.INTERNET,
        full: int = 0,
    ) -> ApiResult:
        return self._text_search(text, encoding, full, SearchIndex(index).operation)

    def call(
        self,
        operation: Operation,
        params: Mapping[str, str] | None = None,
        body: str | None = None,
        encoding: str | None = None,
    ) -> ApiResult:
        """Run one API call and parse its response.

        Never raises for local failures; those return an empty ApiResult.
        """
        try:
            request = build_request(
                self.credentials,
                operation,
                params,
                body=body,
                encoding=encoding or self.settings.encoding,
                api_url=self.settings.api_url,
            )
            text = send(request, self.settings, self.session)
            root = parse_response(text)
        except (RequestBuildError, TransportError, ResponseParseError) as e:
            logger.warning("Copyscape %s call failed: %s", operation.value, e)
            return ApiResult()

        result = ApiResult(response=root)
        if result.error is not None:
            logger.info("Copyscape %s returned an error: %s", operation.value, result.error)
        return result

    def _url_search(self, url: str, full: int, operation: Operation) -> ApiResult:
        params = {"q": url}
        params.update(_full_param(full))
        return self.call(operation, params)

    def _text_search(self, text: str, encoding: str | None, full: int, operation: Operation) -> ApiResult:
        # the e parameter and the body must agree on one encoding
        encoding = encoding or self.settings.encoding
        params = {"e": encoding}
        params.update(_full_param(full))
        return self.call(operation, params, body=text, encoding=encoding)


def _full_param(full: int) -> dict[str, str]:
    """Full comparison count; zero means none and is left off the request."""
    if full < 0:
        raise ValueError(f"full must be zero or positive, got {full}")
    if full == 0:
        return {}
    return {"c": str(full)}
