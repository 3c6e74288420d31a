# scripts/smoke.py
"""
Live check against goodreads.com: look up a few well-known books and run
one search, printing a one-line summary for each.
Usage:
    python scripts/smoke.py            # browser
    python scripts/smoke.py http       # requests only
"""
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from grscrape.cli import make_fetcher
from grscrape.providers.base import GrscrapeError
from grscrape.providers.goodreads import GoodreadsProvider
from grscrape.utils import setup_logging

TEST_IDS = [
    "5907",     # The Hobbit
    "17245",    # Dracula
    "234225",   # Dune
]
TEST_QUERY = "the left hand of darkness"


def main():
    setup_logging("INFO")
    kind = sys.argv[1] if len(sys.argv) > 1 else "browser"
    provider = GoodreadsProvider(make_fetcher(kind))
    failures = 0

    for book_id in TEST_IDS:
        print(f"\n=== lookup {book_id} ===")
        try:
            b = provider.get_detail(book_id)
        except GrscrapeError as e:
            failures += 1
            print("  -> failed:", e)
            continue
        ed = b.edition_details
        print(f"  -> {b.title!r} | series={b.series!r} | authors={b.authors} | "
              f"ratings={b.number_of_ratings} | genres={len(b.genres)} | isbn13={ed.isbn13}")
        time.sleep(1)

    print(f"\n=== search {TEST_QUERY!r} ===")
    try:
        rows = provider.search(TEST_QUERY)
        print(f"  -> {len(rows)} rows; first: {rows[0].title!r} ({rows[0].goodreads_id})" if rows else "  -> no rows")
    except GrscrapeError as e:
        failures += 1
        print("  -> failed:", e)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
