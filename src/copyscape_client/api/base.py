"""Request-side models shared by the builder, the transport and the client."""

from enum import Enum

from pydantic import BaseModel


class Operation(str, Enum):
    """API actions, valued by their ``o=`` wire tag."""

    INTERNET_SEARCH = "csearch"
    PRIVATE_SEARCH = "psearch"
    COMBINED_SEARCH = "cpsearch"
    BALANCE = "balance"
    PRIVATE_ADD = "pindexadd"
    PRIVATE_DELETE = "pindexdel"


class SearchIndex(str, Enum):
    """Which corpus a search runs against."""

    INTERNET = "internet"
    PRIVATE = "private"
    BOTH = "both"

    @property
    def operation(self) -> Operation:
        return {
            SearchIndex.INTERNET: Operation.INTERNET_SEARCH,
            SearchIndex.PRIVATE: Operation.PRIVATE_SEARCH,
            SearchIndex.BOTH: Operation.COMBINED_SEARCH,
        }[self]


class ApiRequest(BaseModel):
    """A fully encoded request, ready to send."""

    method: str  # GET / POST
    url: str
    body: bytes | None = None
    encoding: str = "UTF-8"
    operation: Operation
