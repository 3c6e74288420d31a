# grscrape/dom.py
"""
Thin query layer over BeautifulSoup.

Lookups never raise: a selector that matches nothing gives [] / None, so
every field extractor can treat "not found" as an ordinary outcome. Only
parse_html() can fail, and only when the input is not a document at all.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Union

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag
from soupsieve import SelectorSyntaxError

from .providers.base import DocumentError
from .utils import normalize_whitespace

logger = logging.getLogger(__name__)

PARSER = "lxml"


class Node:
    """A queryable element. Documents and search rows are both Nodes."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def __repr__(self):
        return f"<Node {self._tag.name}>"

    def select(self, css: str) -> List["Node"]:
        try:
            return [Node(t) for t in self._tag.select(css)]
        except SelectorSyntaxError as e:
            logger.warning("bad selector %r: %s", css, e)
            return []

    def select_one(self, css: str) -> Optional["Node"]:
        hits = self.select(css)
        return hits[0] if hits else None

    @property
    def name(self) -> str:
        return self._tag.name

    @property
    def text(self) -> str:
        # descendants are joined without a separator, then whitespace collapsed
        return normalize_whitespace(self._tag.get_text())

    def attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):  # multi-valued attributes such as class
            value = " ".join(value)
        if value is None:
            return None
        value = value.strip()
        return value or None

    # ---- shortcuts for "first match, or None" ----
    def text_of(self, css: str) -> Optional[str]:
        node = self.select_one(css)
        if node is None:
            return None
        return node.text or None

    def attr_of(self, css: str, name: str) -> Optional[str]:
        node = self.select_one(css)
        if node is None:
            return None
        return node.attr(name)


class Document(Node):
    """Root of a parsed page."""

    def __init__(self, soup: BeautifulSoup):
        super().__init__(soup)
        self.soup = soup


def parse_html(html: Union[str, bytes]) -> Document:
    """
    Parse an HTML string into a Document.

    Raises DocumentError when the input cannot be read as a document:
    wrong type, blank, rejected by the parser, or no elements at all.
    Broken-but-present markup is fine; lxml repairs what it can.
    """
    if not isinstance(html, (str, bytes)):
        raise DocumentError(f"expected HTML text, got {type(html).__name__}")
    if not html.strip():
        raise DocumentError("empty HTML document")
    try:
        soup = BeautifulSoup(html, PARSER)
    except ParserRejectedMarkup as e:
        raise DocumentError(f"parser rejected markup: {e}") from e
    if soup.find(True) is None:
        raise DocumentError("no elements found in HTML document")
    return Document(soup)
