# grscrape/search.py
import re
import logging
from typing import List, Union
from urllib.parse import urlencode, urljoin

from .config import BASE_URL, SEARCH_URL
from .dom import Document, Node, parse_html
from .providers.base import BookSearchRecord, new_accumulator
from .rules import Accumulator, Capture, FieldRule, ListRule, assemble, rule
from .utils import strip_commas

logger = logging.getLogger(__name__)

BOOK_ROW = 'tr[itemtype="http://schema.org/Book"]'
TITLE_LINK = ".bookTitle"

# /book/show/5907.The_Hobbit  or  /book/show/5907-the-hobbit
GOODREADS_ID_RE = re.compile(r"/show/(\d+)")
AVG_RATING_RE = re.compile(r"([\d.]+)\s+avg rating")
RATINGS_RE = re.compile(r"—\s+([\d,]+)\s+ratings")

SEARCH_FIELDS = ("title", "author", "all")


def build_search_url(query: str, search_type: str = "books", search_field: str = "all") -> str:
    if search_field not in SEARCH_FIELDS:
        raise ValueError(f"search field must be one of {SEARCH_FIELDS}, got {search_field!r}")
    params = [("utf8", "✓"), ("q", query), ("search_type", search_type)]
    if search_field != "all":
        params.append(("search[field]", search_field))
    return f"{SEARCH_URL}?{urlencode(params)}"


def absolute_url(href: str) -> str:
    return urljoin(BASE_URL + "/", href)


def parse_details_link(row: Node, acc: Accumulator):
    href = row.attr_of(TITLE_LINK, "href")
    if not href:
        # no link: neither the URL nor the id can be known
        return
    url = absolute_url(href)
    acc["details_url"] = url
    m = GOODREADS_ID_RE.search(url)
    if m:
        acc["goodreads_id"] = m.group(1)


ROW_EXTRACTORS = (
    rule('.bookTitle span[itemprop="name"]', "title"),
    parse_details_link,
    ListRule("authors", ".authorName__container", item_selector='span[itemprop="name"]'),
    rule(".greyText.smallText.uitext", "published_year", r"published\s+(\d{4})"),
    FieldRule(".minirating", (
        Capture("average_rating", AVG_RATING_RE),
        Capture("number_of_ratings", RATINGS_RE, strip_commas),
    )),
)


def parse_search_row(row: Node) -> BookSearchRecord:
    acc = new_accumulator(BookSearchRecord)
    assemble(row, acc, ROW_EXTRACTORS)
    return BookSearchRecord.from_accumulator(acc)


def extract_search_results(doc: Document) -> List[BookSearchRecord]:
    """One record per book row, in document order."""
    return [parse_search_row(row) for row in doc.select(BOOK_ROW)]


def parse_search_results(html: Union[str, bytes]) -> List[BookSearchRecord]:
    results = extract_search_results(parse_html(html))
    logger.debug("parsed %d search rows", len(results))
    return results
