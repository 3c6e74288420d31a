import re
import sys
import logging
from typing import Iterable, List, Optional

_WS_RE = re.compile(r'\s+')
_PAREN_RE = re.compile(r'\([^()]*\)')

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def normalize_whitespace(s: str) -> str:
    return _WS_RE.sub(' ', s or '').strip()


def strip_commas(s: Optional[str]) -> Optional[str]:
    if s is None:
        return None
    return s.replace(',', '')


def strip_parentheticals(s: str) -> str:
    """'London (England)' -> 'London ', 'Rome (Italy (EU))' -> 'Rome '"""
    s = s or ''
    while True:
        stripped = _PAREN_RE.sub('', s)  # innermost pairs first
        if stripped == s:
            return s
        s = stripped


def unique(items: Iterable[str]) -> List[str]:
    """Drop repeats, keeping the first occurrence of each item."""
    seen = set()
    out: List[str] = []
    for it in items:
        if it in seen:
            continue
        seen.add(it)
        out.append(it)
    return out


def non_empty(s: Optional[str]) -> Optional[str]:
    if s is None:
        return None
    s = s.strip()
    return s or None


def setup_logging(level: str = "WARNING"):
    """Log to stderr; stdout carries the JSON payload."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
