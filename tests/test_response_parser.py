from pathlib import Path

import pytest

from copyscape_client.errors import ResponseParseError
from copyscape_client.response.parser import parse_response

FIXTURES = Path(__file__).parent / "fixtures"


def _fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class TestParseResponse:
    def test_search_response(self):
        root = parse_response(_fixture("search_response.xml"))
        assert root.name == "response"
        assert root.text is None
        assert root.find_text("count") == "2"

        results = [child for child in root.children if child.name == "result"]
        assert len(results) == 2
        assert results[0].find_text("minwordsmatched") == "1210"
        assert results[1].find_text("title") == "Déclaration"

    def test_entities_are_decoded(self):
        root = parse_response(_fixture("search_response.xml"))
        result = root.find("result")
        assert result.find_text("viewurl") == "http://view.copyscape.com/?r=abc&s=1"
        assert result.find_text("htmlsnippet").startswith('<font color="#777777">')

    def test_empty_leaf_has_empty_text(self):
        root = parse_response(_fixture("search_response.xml"))
        second = root.children[-1]
        assert second.find("htmlsnippet").text == ""

    def test_children_keep_document_order(self):
        root = parse_response(_fixture("balance_response.xml"))
        assert [c.name for c in root.children] == ["value", "total", "today"]

    def test_error_response(self):
        root = parse_response(_fixture("error_response.xml"))
        assert root.error == "rate limit exceeded"
        assert any(node.name == "error" for node in root.walk())

    def test_single_leaf_root(self):
        root = parse_response("<response>done</response>")
        assert root.is_leaf
        assert root.text == "done"

    def test_malformed(self):
        with pytest.raises(ResponseParseError):
            parse_response("<response><unclosed></response>")

    def test_not_xml(self):
        with pytest.raises(ResponseParseError):
            parse_response("<html>Service unavailable")

    def test_empty_body(self):
        with pytest.raises(ResponseParseError):
            parse_response("")

    def test_deep_nesting(self):
        depth = 3000
        text = "<n>" * depth + "x" + "</n>" * depth
        root = parse_response(text)
        nodes = list(root.walk())
        assert len(nodes) == depth
        assert nodes[-1].text == "x"
