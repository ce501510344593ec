"""Client for the Copyscape Premium plagiarism-detection API."""

from copyscape_client.client import CopyscapeClient
from copyscape_client.config import ClientSettings, Credentials, load_config
from copyscape_client.response.base import ResponseNode
from copyscape_client.response.result import ApiResult

__all__ = [
    "ApiResult",
    "ClientSettings",
    "CopyscapeClient",
    "Credentials",
    "ResponseNode",
    "load_config",
]
