# grscrape/providers/goodreads.py
import logging
from time import perf_counter
from typing import List

from ..detail import parse_book_details
from ..search import build_search_url, parse_search_results
from .base import BookDetailRecord, BookSearchRecord, Fetcher

logger = logging.getLogger(__name__)


class GoodreadsProvider:
    """
    Fetch + parse. Query parameters are resolved into the URL here; the
    parsers only ever see the HTML.
    """
    site = "goodreads"

    def __init__(self, fetcher: Fetcher):
        self.fetcher = fetcher

    def search(self, query: str, search_field: str = "all",
               search_type: str = "books") -> List[BookSearchRecord]:
        query = (query or "").strip()
        if not query:
            raise ValueError("search query is empty")
        url = build_search_url(query, search_type, search_field)
        logger.info('searching for "%s" (type=%s, field=%s) at %s',
                    query, search_type, search_field, url)
        t0 = perf_counter()
        results = parse_search_results(self.fetcher.fetch_search(url))
        logger.info("%d results (%.1fs)", len(results), perf_counter() - t0)
        return results

    def get_detail(self, book_id: str) -> BookDetailRecord:
        book_id = str(book_id or "").strip()
        if not book_id:
            raise ValueError("book id is empty")
        t0 = perf_counter()
        record = parse_book_details(self.fetcher.fetch_detail(book_id))
        logger.info("book %s parsed (%.1fs)", book_id, perf_counter() - t0)
        return record
