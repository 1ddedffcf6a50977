"""Aggregate stylesheet statistics: counts, specificity, and size."""

from __future__ import annotations

import gzip
import logging
from collections import Counter
from dataclasses import dataclass

from cssselect import SelectorError
from cssselect import parse as parse_selector

from cssrefactor.model.stylesheet import Stylesheet

__all__ = ["CSSStats", "compute_stats", "selector_specificity", "split_selectors"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CSSStats:
    """Counts and measurements for one stylesheet.

    Attributes:
        size_bytes: UTF-8 size of the source text.
        gzip_size_bytes: Size of the gzip-compressed source, as a transfer estimate.
        selectors: Every individual selector (comma groups split apart).
        properties: One property name per declaration, in source order.
        rule_total: Style rules, including those nested in at-rules.
        media_query_total: Number of ``@media`` blocks.
        specificities: ``a*100 + b*10 + c`` for each selector cssselect accepts.
    """

    size_bytes: int
    gzip_size_bytes: int
    selectors: tuple[str, ...]
    properties: tuple[str, ...]
    rule_total: int
    media_query_total: int
    specificities: tuple[int, ...]

    @property
    def selector_total(self) -> int:
        return len(self.selectors)

    @property
    def declaration_total(self) -> int:
        return len(self.properties)

    @property
    def max_specificity(self) -> int:
        return max(self.specificities, default=0)

    @property
    def average_specificity(self) -> float:
        if not self.specificities:
            return 0.0
        return sum(self.specificities) / len(self.specificities)

    @property
    def id_selectors(self) -> tuple[str, ...]:
        return tuple(s for s in self.selectors if "#" in s)

    def top_properties(self, n: int = 10) -> list[tuple[str, int]]:
        """Most used properties, count descending; ties keep first-seen order."""
        return Counter(self.properties).most_common(n)


def split_selectors(prelude: str) -> list[str]:
    """Split a selector list on top-level commas.

    Commas inside parentheses, attribute brackets, or quoted strings do not
    split (``:is(a, b)``, ``[title="a,b"]``).
    """
    parts: list[str] = []
    buf: list[str] = []
    depth = 0
    quote = ""
    for ch in prelude:
        if quote:
            if ch == quote:
                quote = ""
        elif ch in ("'", '"'):
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            parts.append("".join(buf).strip())
            buf = []
            continue
        buf.append(ch)
    parts.append("".join(buf).strip())
    return [p for p in parts if p]


def selector_specificity(selector: str) -> int | None:
    """Return the specificity of one selector as ``a*100 + b*10 + c``.

    Returns ``None`` when cssselect cannot parse the selector.
    """
    try:
        parsed = parse_selector(selector)
    except SelectorError as exc:
        logger.debug("no specificity for %r: %s", selector, exc)
        return None
    if not parsed:
        return None
    a, b, c = parsed[0].specificity()
    return a * 100 + b * 10 + c


def compute_stats(stylesheet: Stylesheet, source: str) -> CSSStats:
    """Compute :class:`CSSStats` for a parsed stylesheet and its source text."""
    encoded = source.encode("utf-8")
    rules = list(stylesheet.style_rules())

    selectors: list[str] = []
    specificities: list[int] = []
    properties: list[str] = []
    for rule in rules:
        for selector in split_selectors(rule.selector):
            selectors.append(selector)
            value = selector_specificity(selector)
            if value is not None:
                specificities.append(value)
        properties.extend(d.property for d in rule.declarations)

    return CSSStats(
        size_bytes=len(encoded),
        gzip_size_bytes=len(gzip.compress(encoded)),
        selectors=tuple(selectors),
        properties=tuple(properties),
        rule_total=len(rules),
        media_query_total=len(stylesheet.media_rules),
        specificities=tuple(specificities),
    )
