"""Outcome of a single API call."""

from functools import cached_property

from pydantic import BaseModel

from copyscape_client.response.base import ResponseNode
from copyscape_client.response.render import render_tree


class ApiResult(BaseModel):
    """Parsed response, or no response at all.

    ``response`` is None when the call failed locally (connection, timeout,
    HTTP status, encoding or XML error). An error reported by the API itself
    still produces a tree; check ``error`` for it.
    """

    response: ResponseNode | None = None

    @property
    def failed(self) -> bool:
        return self.response is None

    @property
    def error(self) -> str | None:
        if self.response is None:
            return None
        return self.response.error

    @property
    def ok(self) -> bool:
        return self.response is not None and self.response.error is None

    @property
    def handle(self) -> str | None:
        """Handle of a document just added to the private index."""
        if self.response is None:
            return None
        return self.response.find_text("handle")

    @cached_property
    def rendered(self) -> str:
        return render_tree(self.response)
