"""Text and HTML rendering of response trees.

The rendered text is meant to be dropped straight into an HTML page, so
every leaf value goes through html_encode.
"""

from copyscape_client.response.base import ResponseNode

INDENT = "\t"


def html_encode(text: str) -> str:
    """Replace non-ASCII characters and ``"``, ``<``, ``>`` with numeric references."""
    out = []
    for c in text:
        if ord(c) > 127 or c in '"<>':
            out.append(f"&#{ord(c)};")
        else:
            out.append(c)
    return "".join(out)


def render_tree(node: ResponseNode | None) -> str:
    """Render ``node`` as an indented ``name: value`` outline.

    Each element starts a new line indented by its depth; a leaf's escaped
    text follows its name on the same line.
    """
    if node is None:
        return ""

    parts = []
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        parts.append(f"\n{INDENT * depth}{current.name}: ")
        if current.is_leaf:
            parts.append(html_encode(current.text or ""))
        else:
            stack.extend((child, depth + 1) for child in reversed(current.children))
    return "".join(parts)


def wrap_title(title: str) -> str:
    return f"<big style='margin-left:5%'><b>{html_encode(title)}:</b></big>"


def wrap_node(node: ResponseNode | None) -> str:
    return (
        "<div style='overflow:auto; max-height:300px; margin-left:5%; width:90%'>"
        f"<pre>{render_tree(node)}</pre></div><br>"
    )
