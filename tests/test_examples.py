"""End-to-end run of the example sequence against a mocked HTTP session."""

from pathlib import Path
from unittest.mock import MagicMock
from urllib.parse import parse_qsl, urlsplit

import requests

from copyscape_client.client import CopyscapeClient
from copyscape_client.config import Credentials
from copyscape_client.examples import EXAMPLE_ENCODING, EXAMPLE_ID, EXAMPLE_TEXT, EXAMPLE_TITLE, run_examples

FIXTURES = Path(__file__).parent / "fixtures"

RESPONSES = {
    "csearch": "search_response.xml",
    "psearch": "search_response.xml",
    "cpsearch": "search_response.xml",
    "balance": "balance_response.xml",
    "pindexadd": "add_response.xml",
    "pindexdel": "balance_response.xml",
}


def _fake_session() -> MagicMock:
    def respond(method, url, **kwargs):
        operation = dict(parse_qsl(urlsplit(url).query))["o"]
        response = MagicMock()
        response.content = (FIXTURES / RESPONSES[operation]).read_bytes()
        return response

    session = MagicMock()
    session.request.side_effect = respond
    return session


def _calls(session: MagicMock) -> list[tuple[str, dict[str, str], bytes | None]]:
    calls = []
    for call in session.request.call_args_list:
        method, url = call[0]
        params = dict(parse_qsl(urlsplit(url).query, keep_blank_values=True, encoding="latin-1"))
        calls.append((method, params, call[1]["data"]))
    return calls


class TestRunExamples:
    def test_call_sequence(self):
        session = _fake_session()
        run_examples(CopyscapeClient(Credentials(username="user", api_key="key"), session=session))

        calls = _calls(session)
        assert [params["o"] for _, params, _ in calls] == [
            "csearch", "csearch", "csearch", "csearch", "balance",
            "pindexadd", "pindexadd", "psearch", "pindexdel", "cpsearch",
        ]
        assert "c" not in calls[0][1]
        assert calls[1][1]["c"] == "2"
        assert calls[2][0] == "POST"
        assert calls[2][2] == EXAMPLE_TEXT.encode("latin-1")
        assert calls[2][1]["e"] == EXAMPLE_ENCODING

        method, add_params, _ = calls[6]
        assert method == "POST"
        assert add_params["a"] == EXAMPLE_TITLE
        assert add_params["i"] == EXAMPLE_ID

    def test_delete_uses_returned_handle(self):
        session = _fake_session()
        run_examples(CopyscapeClient(Credentials(username="user", api_key="key"), session=session))

        _, delete_params, _ = _calls(session)[8]
        assert delete_params["h"] == "HANDLE-9f3c"

    def test_page_contents(self):
        session = _fake_session()
        page = run_examples(CopyscapeClient(Credentials(username="user", api_key="key"), session=session))

        assert page.startswith("<html><body>")
        assert page.endswith("</body></html>")
        assert page.count("<pre>") == 10
        assert "Response for a check balance request:" in page
        assert "\tvalue: 99.50" in page
        assert "D&#233;claration" in page

    def test_failures_still_render(self):
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("offline")

        page = run_examples(CopyscapeClient(Credentials(username="user", api_key="key"), session=session))

        assert page.count("<pre></pre>") == 10
        _, delete_params, _ = _calls(session)[8]
        assert delete_params["h"] == ""
