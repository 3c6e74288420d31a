# grscrape/cli.py
"""
Command-line programs.

    grscrape-lookup 5907
    grscrape-search "the hobbit" books title
    grscrape-lookup 5907 --html saved_page.html

JSON goes to stdout (exit 0). Any failure: message on stderr, no JSON, exit 1.
"""
import argparse
import json
import logging
from pathlib import Path
from typing import Callable, List, Optional

from . import config
from .detail import parse_book_details
from .search import SEARCH_FIELDS, parse_search_results
from .providers.base import GrscrapeError
from .providers.goodreads import GoodreadsProvider
from .utils import setup_logging

logger = logging.getLogger(__name__)


def make_fetcher(kind: str, headless: bool = True, executable_path: Optional[str] = None):
    if kind == "http":
        from .providers.http import HttpFetcher
        return HttpFetcher()
    from .providers.browser import BrowserFetcher
    return BrowserFetcher(headless=headless, executable_path=executable_path)


def _add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--html", metavar="FILE", help="Parse a saved HTML page instead of fetching")
    parser.add_argument("--fetcher", choices=["browser", "http"], default="browser",
                        help="How to fetch the page (default: browser)")
    parser.add_argument("--no-headless", action="store_true", help="Show the browser window")
    parser.add_argument("--chrome", metavar="PATH", help="Chrome/Chromium executable to launch")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")


def _read_html(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def emit(payload):
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def run(produce: Callable[[], object]) -> int:
    """Print the payload and return 0, or log the failure and return 1."""
    try:
        payload = produce()
    except KeyboardInterrupt:
        logger.error("interrupted")
        return 1
    except (GrscrapeError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1
    except Exception as e:
        logger.error("unexpected error: %s", e, exc_info=True)
        return 1
    emit(payload)
    return 0


def lookup_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="grscrape-lookup",
        description="Print the details of a Goodreads book as JSON",
    )
    parser.add_argument("book_id", help="Goodreads book id, e.g. 5907")
    _add_common(parser)
    args = parser.parse_args(argv)
    setup_logging("INFO" if args.verbose else config.LOG_LEVEL)

    def produce():
        if args.html:
            record = parse_book_details(_read_html(args.html))
        else:
            fetcher = make_fetcher(args.fetcher, not args.no_headless, args.chrome)
            record = GoodreadsProvider(fetcher).get_detail(args.book_id)
        return record.to_dict()

    return run(produce)


def search_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="grscrape-search",
        description="Print Goodreads search results as a JSON array",
    )
    parser.add_argument("query", help="Search text")
    parser.add_argument("search_type", nargs="?", default="books", help="Search type (default: books)")
    parser.add_argument("search_field", nargs="?", default="all", choices=SEARCH_FIELDS,
                        help="Field to search in (default: all)")
    _add_common(parser)
    args = parser.parse_args(argv)
    setup_logging("INFO" if args.verbose else config.LOG_LEVEL)

    def produce():
        if args.html:
            results = parse_search_results(_read_html(args.html))
        else:
            fetcher = make_fetcher(args.fetcher, not args.no_headless, args.chrome)
            results = GoodreadsProvider(fetcher).search(args.query, args.search_field, args.search_type)
        return [r.to_dict() for r in results]

    return run(produce)
