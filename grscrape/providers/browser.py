# grscrape/providers/browser.py
"""
Playwright-backed page acquisition.

Goodreads renders most of the book page client side, and the edition
details and the full genre list only appear after clicking their
"expand" controls. Those clicks are best effort: each wait has its own
timeout and a timeout only means the HTML comes back less expanded.
Only navigation and the main content wait are required.
"""
import logging
from contextlib import contextmanager
from typing import List, Optional
from urllib.parse import urlparse

from playwright.sync_api import sync_playwright, Error as PlaywrightError, TimeoutError as PlaywrightTimeout

from ..config import (
    BOOK_URL, USER_AGENT, BLOCKED_HOSTS,
    NAVIGATION_TIMEOUT_MS, SELECTOR_TIMEOUT_MS, SETTLE_MS, EXPANDED_SETTLE_MS,
)
from .base import AcquisitionError

logger = logging.getLogger(__name__)

BOOK_MAIN_SECTION = ".BookPageMetadataSection"
BOOK_DETAILS_BUTTON = 'button[aria-label="Book details and editions"]'
EDITION_DETAILS = ".EditionDetails"
GENRES_SHOW_ALL = '.BookPageMetadataSection__genres button:has-text("...show all")'
SEARCH_ROW = 'tr[itemtype="http://schema.org/Book"]'

STEALTH_ARGS = [
    '--disable-blink-features=AutomationControlled',  # removes webdriver traces
    '--disable-infobars',
    '--disable-dev-shm-usage',
    '--no-sandbox',
]

# Injected before any page script runs
STEALTH_JS = """
Object.defineProperty(navigator, 'languages', {get: () => ['en-US', 'en'], configurable: true});
window.chrome = window.chrome || {runtime: {}};
"""


def is_blocked(url: str, hosts: List[str]) -> bool:
    host = (urlparse(url).hostname or "").lower()
    return any(host == h or host.endswith("." + h) for h in hosts)


class BrowserFetcher:
    """
    Anti-detection and ad/tracker blocking are construction-time options;
    they only change how pages are loaded, never what gets parsed.
    """

    def __init__(
        self,
        headless: bool = True,
        user_agent: str = USER_AGENT,
        stealth: bool = True,
        block_trackers: bool = True,
        blocked_hosts: Optional[List[str]] = None,
        executable_path: Optional[str] = None,
    ):
        self.headless = headless
        self.user_agent = user_agent
        self.stealth = stealth
        self.block_trackers = block_trackers
        self.blocked_hosts = list(BLOCKED_HOSTS if blocked_hosts is None else blocked_hosts)
        self.executable_path = executable_path

    # ---------- browser lifecycle ----------
    @contextmanager
    def _open_page(self):
        with sync_playwright() as p:
            browser = None
            try:
                browser = p.chromium.launch(
                    headless=self.headless,
                    args=STEALTH_ARGS if self.stealth else [],
                    executable_path=self.executable_path,
                )
                context = browser.new_context(user_agent=self.user_agent, locale="en-US")
                if self.stealth:
                    context.add_init_script(STEALTH_JS)
                page = context.new_page()
                if self.block_trackers:
                    page.route("**/*", self._route)
                yield page
            except PlaywrightError as e:
                raise AcquisitionError(f"browser error: {e}") from e
            finally:
                if browser is not None:
                    browser.close()

    def _route(self, route):
        if is_blocked(route.request.url, self.blocked_hosts):
            route.abort()
        else:
            route.continue_()

    # ---------- waits ----------
    def _goto(self, page, url: str):
        logger.info("navigating to %s", url)
        try:
            page.goto(url, wait_until="networkidle", timeout=NAVIGATION_TIMEOUT_MS)
        except PlaywrightTimeout as e:
            raise AcquisitionError(f"navigation timed out: {url}") from e

    def _require(self, page, selector: str):
        try:
            page.wait_for_selector(selector, state="visible", timeout=SELECTOR_TIMEOUT_MS)
        except PlaywrightTimeout as e:
            raise AcquisitionError(f"required section {selector!r} never appeared") from e

    def _optional(self, page, selector: str):
        """Element handle, or None if it did not show up in time."""
        try:
            return page.wait_for_selector(selector, state="visible", timeout=SELECTOR_TIMEOUT_MS)
        except PlaywrightTimeout:
            logger.info("optional element %r not found, continuing", selector)
            return None

    def _click_optional(self, page, selector: str) -> bool:
        button = self._optional(page, selector)
        if button is None:
            return False
        try:
            button.click(timeout=SELECTOR_TIMEOUT_MS)
        except PlaywrightError as e:
            logger.info("could not click %r: %s", selector, e)
            return False
        return True

    # ---------- page flows ----------
    def _expand_book_details(self, page):
        if self._click_optional(page, BOOK_DETAILS_BUTTON):
            self._optional(page, EDITION_DETAILS)

    def _expand_genres(self, page):
        self._click_optional(page, GENRES_SHOW_ALL)

    def fetch_detail(self, book_id: str) -> str:
        with self._open_page() as page:
            self._goto(page, f"{BOOK_URL}{book_id}")
            self._require(page, BOOK_MAIN_SECTION)
            page.wait_for_timeout(SETTLE_MS)
            self._expand_book_details(page)
            self._expand_genres(page)
            page.wait_for_timeout(EXPANDED_SETTLE_MS)
            return page.content()

    def fetch_search(self, url: str) -> str:
        with self._open_page() as page:
            self._goto(page, url)
            self._require(page, SEARCH_ROW)
            return page.content()
