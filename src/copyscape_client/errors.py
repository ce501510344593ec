"""Exceptions raised inside the client.

Only ConfigError reaches callers of CopyscapeClient. The others are caught
at the call boundary and reported as an empty ApiResult.
"""


class CopyscapeError(Exception):
    """Base class for all client errors."""


class ConfigError(CopyscapeError):
    """Configuration file is missing or invalid."""


class RequestBuildError(CopyscapeError):
    """A request could not be encoded with the requested character set."""


class TransportError(CopyscapeError):
    """The HTTP request failed or the response could not be read."""


class ResponseParseError(CopyscapeError):
    """The response body is not well-formed XML."""
