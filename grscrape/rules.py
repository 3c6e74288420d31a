# grscrape/rules.py
"""
Declarative field rules and the fold that runs them.

An extractor is any callable ``(node, acc) -> None`` that writes into the
accumulator dict. FieldRule and ListRule cover the common "select a node,
maybe run a regex, store the text" shapes; anything odder is a plain
function in the same table.
"""
from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, Pattern, Tuple

from .dom import Node
from .utils import non_empty

logger = logging.getLogger(__name__)

Accumulator = Dict[str, Any]
Extractor = Callable[[Node, Accumulator], None]


@dataclass(frozen=True)
class Capture:
    """Store group(1) of ``pattern`` (or the whole text) under ``key``."""
    key: str
    pattern: Optional[Pattern] = None
    transform: Optional[Callable[[str], Optional[str]]] = None

    def value(self, text: str) -> Optional[str]:
        if self.pattern is not None:
            m = self.pattern.search(text)
            if not m:
                return None
            text = m.group(1)
        if self.transform is not None:
            text = self.transform(text)
        return non_empty(text)


@dataclass(frozen=True)
class FieldRule:
    """
    Read the first node matching ``selector`` once (its text, or ``attr``),
    then let each capture pull its own value out of it independently.
    """
    selector: str
    captures: Tuple[Capture, ...]
    attr: Optional[str] = None

    def __call__(self, node: Node, acc: Accumulator) -> None:
        if self.attr:
            text = node.attr_of(self.selector, self.attr)
        else:
            text = node.text_of(self.selector)
        if text is None:
            return
        for cap in self.captures:
            value = cap.value(text)
            if value is not None:
                acc[cap.key] = value

    def __str__(self):
        return f"FieldRule({self.selector!r})"


@dataclass(frozen=True)
class ListRule:
    """Append the text of every match, in document order, minus ``exclude``."""
    key: str
    selector: str
    item_selector: Optional[str] = None
    exclude: FrozenSet[str] = frozenset()

    def __call__(self, node: Node, acc: Accumulator) -> None:
        for hit in node.select(self.selector):
            text = hit.text_of(self.item_selector) if self.item_selector else hit.text
            if not text or text in self.exclude:
                continue
            acc[self.key].append(text)

    def __str__(self):
        return f"ListRule({self.key!r})"


def rule(selector: str, key: str, pattern: Optional[str] = None, transform=None,
         attr: Optional[str] = None) -> FieldRule:
    """Shorthand for a single-capture FieldRule."""
    compiled = re.compile(pattern) if pattern else None
    return FieldRule(selector, (Capture(key, compiled, transform),), attr=attr)


def _name(extract: Extractor) -> str:
    return getattr(extract, "__name__", None) or str(extract)


def assemble(node: Node, acc: Accumulator, extractors: Iterable[Extractor]) -> Accumulator:
    """
    Run every extractor against ``node``. Each one works on its own copy
    of the accumulator; if it blows up, its writes are dropped and the
    fields it owns keep their absence values.
    """
    for extract in extractors:
        scratch = copy.deepcopy(acc)
        try:
            extract(node, scratch)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            logger.warning("extractor %s failed, fields left empty: %s", _name(extract), e)
            continue
        acc.update(scratch)
    return acc
