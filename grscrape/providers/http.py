# grscrape/providers/http.py
import logging
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import BASE_URL, BOOK_URL, USER_AGENT, REQUEST_TIMEOUT
from .base import AcquisitionError

logger = logging.getLogger(__name__)


def _mk_session():
    s = requests.Session()
    s.headers.update({
        "User-Agent": USER_AGENT,
        "Accept-Language": "en-US,en;q=0.9",
        "Referer": BASE_URL + "/",
    })
    retry = Retry(total=2, connect=1, read=1, backoff_factor=0.3,
                  status_forcelist=[429, 500, 502, 503, 504], raise_on_status=False)
    s.mount("https://", HTTPAdapter(max_retries=retry))
    s.mount("http://", HTTPAdapter(max_retries=retry))
    return s


class HttpFetcher:
    """
    Fetch pages without a browser. Search pages are server rendered;
    detail pages come back without the expanded edition/genre sections,
    which the parser tolerates.
    """

    def __init__(self, timeout=REQUEST_TIMEOUT):
        self.timeout = timeout
        self.sess = _mk_session()

    def _get(self, url: str) -> str:
        logger.info("GET %s", url)
        try:
            r = self.sess.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise AcquisitionError(f"request failed for {url}: {e}") from e
        if r.status_code != 200:
            raise AcquisitionError(f"HTTP {r.status_code} for {url}")
        return r.text

    def fetch_detail(self, book_id: str) -> str:
        return self._get(f"{BOOK_URL}{book_id}")

    def fetch_search(self, url: str) -> str:
        return self._get(url)

    def close(self):
        self.sess.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
