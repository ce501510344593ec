"""XML response parser.

Converts the response text into a ResponseNode tree without recursion, so
deeply nested payloads cannot exhaust the interpreter stack.
"""

import xml.etree.ElementTree as ET

from copyscape_client.errors import ResponseParseError
from copyscape_client.response.base import ResponseNode


def parse_response(text: str) -> ResponseNode:
    """Parse an API response into a tree rooted at the document element."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ResponseParseError(f"Malformed XML response: {e}") from e

    root_node = _make_node(root)
    stack = [(root, root_node)]
    while stack:
        element, node = stack.pop()
        for child in element:
            child_node = _make_node(child)
            node.children.append(child_node)
            stack.append((child, child_node))
    return root_node


def _make_node(element: ET.Element) -> ResponseNode:
    if len(element):
        return ResponseNode(name=element.tag)
    return ResponseNode(name=element.tag, text=element.text or "")
