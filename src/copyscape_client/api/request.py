"""Request builder.

Turns an operation and its parameters into an ApiRequest. Credentials,
the operation tag and every parameter key and value are percent-encoded in
the call's character set, so a value containing ``&`` or ``=`` can never
introduce an extra query parameter.
"""

from collections.abc import Mapping
from urllib.parse import quote

from copyscape_client.api.base import ApiRequest, Operation
from copyscape_client.config import DEFAULT_API_URL, DEFAULT_ENCODING, Credentials
from copyscape_client.errors import RequestBuildError


def build_request(
    credentials: Credentials,
    operation: Operation,
    params: Mapping[str, str] | None = None,
    body: str | None = None,
    encoding: str | None = None,
    api_url: str = DEFAULT_API_URL,
) -> ApiRequest:
    """Build the URL (and POST body, if any) for one API call.

    The request is a POST exactly when ``body`` is given.
    """
    encoding = encoding or DEFAULT_ENCODING

    pairs = [
        ("u", credentials.username),
        ("k", credentials.api_key),
        ("o", operation.value),
    ]
    # snapshot; the caller's mapping is never touched
    pairs.extend((key, value) for key, value in dict(params or {}).items())

    query = "&".join(
        f"{encode_component(key, encoding)}={encode_component(value, encoding)}"
        for key, value in pairs
    )

    data = None
    if body is not None:
        try:
            data = body.encode(encoding)
        except (LookupError, UnicodeEncodeError) as e:
            raise RequestBuildError(f"Cannot encode request body as {encoding}: {e}") from e

    return ApiRequest(
        method="GET" if body is None else "POST",
        url=f"{api_url}?{query}",
        body=data,
        encoding=encoding,
        operation=operation,
    )


def encode_component(value: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Percent-encode everything except RFC 3986 unreserved characters."""
    try:
        return quote(str(value), safe="", encoding=encoding)
    except (LookupError, UnicodeEncodeError) as e:
        raise RequestBuildError(f"Cannot encode parameter as {encoding}: {e}") from e
