"""Minimal traversal interface over BeautifulSoup.

The extractor walks pages through ``Node`` only, so the HTML backend can be
swapped without touching the extraction rules.
"""

from bs4 import BeautifulSoup, Tag, UnicodeDammit
from bs4.builder import ParserRejectedMarkup

from tfdoc_scraper.errors import MarkupParseError

PARSER = "html.parser"


class Node:
    """A single element of a parsed page."""

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def tag_name(self) -> str:
        return self._tag.name

    def find(self, selector: str) -> "Node | None":
        """First descendant matching the CSS selector, in document order."""
        found = self._tag.select_one(selector)
        return Node(found) if found is not None else None

    def find_all(self, selector: str) -> list["Node"]:
        return [Node(t) for t in self._tag.select(selector)]

    def children(self) -> list["Node"]:
        """Direct element children; text nodes are skipped."""
        return [Node(c) for c in self._tag.children if isinstance(c, Tag)]

    def previous(self) -> "Node | None":
        """The element sibling immediately before this one."""
        prev = self._tag.find_previous_sibling(True)
        return Node(prev) if prev is not None else None

    def text(self) -> str:
        return self._tag.get_text()

    def trimmed_text(self) -> str:
        return self._tag.get_text().strip()


def parse_document(markup: str | bytes) -> Node:
    """Parse an HTML body into its root node.

    Bytes are decoded with UnicodeDammit, so UTF-16 and other encodings
    parse as text. Raises MarkupParseError when the body is not text, cannot
    be decoded, still carries NUL characters once decoded, or is rejected by
    the parser.
    """
    if isinstance(markup, bytes):
        markup = UnicodeDammit(markup).unicode_markup
        if markup is None:
            raise MarkupParseError("body could not be decoded as text")
    elif not isinstance(markup, str):
        raise MarkupParseError(f"expected str or bytes, got {type(markup).__name__}")

    if "\x00" in markup:
        raise MarkupParseError("body contains binary data")

    try:
        soup = BeautifulSoup(markup, PARSER)
    except ParserRejectedMarkup as e:
        raise MarkupParseError(str(e)) from e
    return Node(soup)
