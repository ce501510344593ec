"""Example run: exercises every API action and renders an HTML page."""

import logging

from copyscape_client.client import CopyscapeClient
from copyscape_client.response.render import wrap_node, wrap_title
from copyscape_client.response.result import ApiResult

logger = logging.getLogger(__name__)

EXAMPLE_URL = "http://www.copyscape.com/example.html"
EXAMPLE_ENCODING = "ISO-8859-1"
EXAMPLE_TITLE = "Extract from Declaration of Independence"
EXAMPLE_ID = "EXAMPLE_1234"

EXAMPLE_TEXT = (
    "We hold these truths to be self-evident, that all men are created equal, that they are endowed by their "
    "Creator with certain unalienable rights, that among these are Life, Liberty, and the pursuit of Happiness. That to "
    "secure these rights, Governments are instituted among Men, deriving their just powers from the consent of the "
    "governed. That whenever any Form of Government becomes destructive of these ends, it is the Right of the People to "
    "alter or to abolish it, and to institute new Government, laying its foundation on such principles and organizing "
    "its powers in such form, as to them shall seem most likely to effect their Safety and Happiness. Prudence, indeed, "
    "will dictate that Governments long established should not be changed for light and transient causes; and "
    "accordingly all experience hath shown, that mankind are more disposed to suffer, while evils are sufferable, than "
    "to right themselves by abolishing the forms to which they are accustomed. But when a long train of abuses and "
    "usurpations, pursuing invariably the same Object evinces a design to reduce them under absolute Despotism, it is "
    "their right, it is their duty, to throw off such Government, and to provide new Guards for their future security. "
    "Such has been the patient sufferance of these Colonies; and such is now the necessity which constrains them to "
    "alter their former Systems of Government. The history of the present King of Great Britain is a history of "
    "repeated injuries and usurpations, all having in direct object the establishment of an absolute Tyranny over these "
    "States. To prove this, let Facts be submitted to a candid world. He has refused his Assent to Laws, the most "
    "wholesome and necessary for the public good. "
    "We, therefore, the Representatives of the United States of America, in General Congress, Assembled, "
    "appealing to the Supreme Judge of the world for the rectitude of our intentions, do, in the Name, and by Authority "
    "of the good People of these Colonies, solemnly publish and declare, That these United Colonies are, and of Right "
    "ought to be free and independent states; that they are Absolved from all Allegiance to the British Crown, and that "
    "all political connection between them and the State of Great Britain, is and ought to be totally dissolved; and "
    "that as Free and Independent States, they have full Power to levy War, conclude Peace, contract Alliances, "
    "establish Commerce, and to do all other Acts and Things which Independent States may of right do. And for the "
    "support of this Declaration, with a firm reliance on the Protection of Divine Providence, we mutually pledge to "
    "each other our Lives, our Fortunes, and our sacred Honor."
)


def run_examples(client: CopyscapeClient) -> str:
    """Call each API action once and return the responses as an HTML page."""
    sections: list[tuple[str, ApiResult]] = []

    def add(title: str, result: ApiResult) -> ApiResult:
        logger.info("%s: %s", title, "no result" if result.failed else "ok")
        sections.append((title, result))
        return result

    add("Response for a simple URL Internet search", client.url_search_internet(EXAMPLE_URL))
    add(
        "Response for a URL Internet search with full comparisons for the first two results",
        client.url_search_internet(EXAMPLE_URL, full=2),
    )
    add(
        "Response for a simple text Internet search",
        client.text_search_internet(EXAMPLE_TEXT, EXAMPLE_ENCODING),
    )
    add(
        "Response for a text Internet search with full comparisons for the first two results",
        client.text_search_internet(EXAMPLE_TEXT, EXAMPLE_ENCODING, full=2),
    )
    add("Response for a check balance request", client.check_balance())
    add("Response for a URL add to private index request", client.url_add_to_private(EXAMPLE_URL))
    added = add(
        "Response for a text add to private index request",
        client.text_add_to_private(EXAMPLE_TEXT, EXAMPLE_ENCODING, title=EXAMPLE_TITLE, id=EXAMPLE_ID),
    )
    add("Response for a URL private index search", client.url_search_private(EXAMPLE_URL))
    add("Response for a delete from private index request", client.delete_from_private(added.handle or ""))
    add(
        "Response for a text search of both Internet and private index with full comparisons "
        "for the first result (of each type)",
        client.text_search_internet_and_private(EXAMPLE_TEXT, EXAMPLE_ENCODING, full=1),
    )

    return render_page(sections)


def render_page(sections: list[tuple[str, ApiResult]]) -> str:
    body = "".join(wrap_title(title) + wrap_node(result.response) for title, result in sections)
    return f"<html><body>{body}</body></html>"
