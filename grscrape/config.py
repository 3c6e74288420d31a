# grscrape/config.py
import os
import logging
from pathlib import Path

# Project root
ROOT_DIR = Path(__file__).resolve().parents[1]
ENV_FILE = ROOT_DIR / ".env"

logger = logging.getLogger(__name__)


def load_env_file(env_path: Path):
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            k, v = line.split("=", 1)
            os.environ.setdefault(k.strip(), v.strip())


load_env_file(ENV_FILE)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", name, raw, default)
        return default


# Site URLs
BASE_URL = os.getenv("GRSCRAPE_BASE_URL", "https://www.goodreads.com").rstrip("/")
BOOK_URL = BASE_URL + "/book/show/"
SEARCH_URL = BASE_URL + "/search"

USER_AGENT = os.getenv(
    "GRSCRAPE_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
)

# requests timeouts: (connect, read) seconds
REQUEST_TIMEOUT = (
    _int_env("GRSCRAPE_CONNECT_TIMEOUT", 8),
    _int_env("GRSCRAPE_READ_TIMEOUT", 12),
)

# Browser waits (milliseconds)
NAVIGATION_TIMEOUT_MS = _int_env("GRSCRAPE_NAVIGATION_TIMEOUT_MS", 30000)
SELECTOR_TIMEOUT_MS = _int_env("GRSCRAPE_SELECTOR_TIMEOUT_MS", 10000)
SETTLE_MS = _int_env("GRSCRAPE_SETTLE_MS", 1000)
EXPANDED_SETTLE_MS = _int_env("GRSCRAPE_EXPANDED_SETTLE_MS", 2000)

# Requests to these hosts are aborted when tracker blocking is on
BLOCKED_HOSTS = [
    h.strip() for h in os.getenv(
        "GRSCRAPE_BLOCKED_HOSTS",
        "doubleclick.net,googlesyndication.com,google-analytics.com,"
        "googletagmanager.com,amazon-adsystem.com,adnxs.com,criteo.com,"
        "scorecardresearch.com,quantserve.com,facebook.net",
    ).split(",") if h.strip()
]

LOG_LEVEL = os.getenv("GRSCRAPE_LOG_LEVEL", "WARNING").upper()
