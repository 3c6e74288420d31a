# grscrape/detail.py
import re
import logging
from typing import List, Union

from .dom import Document, Node, parse_html
from .providers.base import BookDetailRecord, new_accumulator
from .rules import Accumulator, Capture, FieldRule, ListRule, assemble, rule
from .utils import normalize_whitespace, strip_commas, strip_parentheticals, unique

logger = logging.getLogger(__name__)

# ====== Selectors (book detail page) ======
TITLE_SECTION = ".BookPageTitleSection__title"
SERIES_LINK = "h3.Text__italic a"
TITLE_HEADING = 'h1[data-testid="bookTitle"]'
DESC_LIST_ITEM = ".DescListItem"
WORK_DETAILS_ITEM = ".WorkDetails " + DESC_LIST_ITEM

# Labels of the "show more" controls; they sit among the genre chips
EXPAND_SENTINELS = frozenset({"...more", "...show all"})
# the same labels glued onto a neighbouring text run
EXPAND_SENTINEL_RE = re.compile(r"\.\.\.(?:more|show all)")

RATINGS_RE = re.compile(r"(\d+(?:,\d+)*)\s+ratings")
REVIEWS_RE = re.compile(r"(\d+(?:,\d+)*)\s+reviews")
ISBN13_RE = re.compile(r"^(\d{13})")
ISBN10_RE = re.compile(r"ISBN10:\s*(\d{10})")

# dt label (lower-cased) -> editionDetails key; "isbn" is split separately
EDITION_LABELS = ("format", "published", "asin", "language")
SETTING_LABEL = "Setting"


def parse_title_and_series(doc: Node, acc: Accumulator):
    section = doc.select_one(TITLE_SECTION)
    if section is None:
        return
    series = section.select_one(SERIES_LINK)
    if series is not None:
        acc["series"] = series.text or None
        acc["title"] = section.text_of(TITLE_HEADING)
    else:
        # no series markup: the whole block is the title
        acc["title"] = section.text or None


def parse_edition_details(doc: Node, acc: Accumulator):
    edition = acc["edition_details"]
    for item in doc.select(DESC_LIST_ITEM):
        label = (item.text_of("dt") or "").lower()
        value = item.text_of("dd")
        if value is None:
            continue
        if label == "isbn":
            # e.g. "9780727860996 (ISBN10: 0727860992)"; either half may be missing
            m13 = ISBN13_RE.search(value)
            m10 = ISBN10_RE.search(value)
            if m13:
                edition["isbn13"] = m13.group(1)
            if m10:
                edition["isbn10"] = m10.group(1)
        elif label in EDITION_LABELS:
            edition[label] = value


def normalize_settings(raw: str) -> List[str]:
    """
    "London (England), London (England), Paris" -> ["London", "Paris"]
    First-seen order is kept.
    """
    places = []
    for piece in raw.split(","):
        piece = EXPAND_SENTINEL_RE.sub("", piece)
        place = normalize_whitespace(strip_parentheticals(piece))
        if place and place not in EXPAND_SENTINELS:
            places.append(place)
    return unique(places)


def parse_settings(doc: Node, acc: Accumulator):
    for item in doc.select(WORK_DETAILS_ITEM):
        if item.text_of("dt") != SETTING_LABEL:
            continue
        raw = item.text_of("dd .TruncatedContent__text") or item.text_of("dd")
        if raw:
            acc["settings"] = normalize_settings(raw)
        return


DETAIL_EXTRACTORS = (
    parse_title_and_series,
    ListRule("authors", ".ContributorLinksList .ContributorLink__name"),
    rule(".RatingStatistics__rating", "rating"),
    FieldRule(".RatingStatistics__meta", (
        Capture("number_of_ratings", RATINGS_RE, strip_commas),
        Capture("number_of_reviews", REVIEWS_RE, strip_commas),
    )),
    ListRule("genres", ".BookPageMetadataSection__genres .Button__labelItem",
             exclude=EXPAND_SENTINELS),
    rule('p[data-testid="pagesFormat"]', "number_of_pages", r"(\d+)\s*pages"),
    rule('p[data-testid="publicationInfo"]', "first_published", r"First published\s+(.+)"),
    rule(".BookPageMetadataSection__description .TruncatedContent__text", "description"),
    rule(".BookCover__image img.ResponsiveImage", "cover_image", attr="src"),
    parse_edition_details,
    parse_settings,
)


def extract_book_details(doc: Document) -> BookDetailRecord:
    acc = new_accumulator(BookDetailRecord)
    assemble(doc, acc, DETAIL_EXTRACTORS)
    return BookDetailRecord.from_accumulator(acc)


def parse_book_details(html: Union[str, bytes]) -> BookDetailRecord:
    """
    Build a BookDetailRecord from a rendered book page.
    Missing sections just leave their fields empty; only unreadable input
    (DocumentError) fails the call.
    """
    record = extract_book_details(parse_html(html))
    logger.debug("parsed book details: title=%r series=%r", record.title, record.series)
    return record
