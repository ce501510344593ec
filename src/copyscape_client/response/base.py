"""Parsed API response tree."""

from collections.abc import Iterator

from pydantic import BaseModel


class ResponseNode(BaseModel):
    """One XML element of an API response.

    A node with children carries no text of its own; a leaf always carries
    text (empty when the element was empty).
    """

    name: str
    text: str | None = None
    children: list["ResponseNode"] = []

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def find(self, name: str) -> "ResponseNode | None":
        """Return the first direct child called ``name``."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find_text(self, name: str) -> str | None:
        child = self.find(name)
        return child.text if child is not None else None

    def walk(self) -> Iterator["ResponseNode"]:
        """Yield this node and all descendants in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def error(self) -> str | None:
        """Text of the first ``error`` element anywhere in the tree."""
        for node in self.walk():
            if node.name == "error":
                return node.text or ""
        return None
