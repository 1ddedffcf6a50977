"""Refactoring hints: repeated margin/padding shorthands and duplicated media queries."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field

__all__ = ["PatternReport", "find_patterns"]

_MARGIN_RE = re.compile(r"margin[:-]\s*(\d+px)\s*(\d+px)\s*(\d+px)\s*(\d+px)")
_PADDING_RE = re.compile(r"padding[:-]\s*(\d+px)\s*(\d+px)\s*(\d+px)\s*(\d+px)")
_MEDIA_BLOCK_RE = re.compile(r"@media\s*\([^\)]+\)\s*\{[^\}]+\}")


@dataclass(frozen=True)
class PatternReport:
    margin: list[tuple[str, int]] = field(default_factory=list)
    padding: list[tuple[str, int]] = field(default_factory=list)
    duplicate_media: list[tuple[str, int]] = field(default_factory=list)


def _count(pattern: re.Pattern[str], source: str) -> Counter[str]:
    return Counter(m.group(0) for m in pattern.finditer(source))


def find_patterns(source: str, top: int = 5, media_threshold: int = 2) -> PatternReport:
    """Scan raw CSS text for repeated four-value shorthands and media queries.

    Media queries are keyed by the text before ``{`` and reported when they
    occur more than *media_threshold* times.
    """
    media = Counter(
        m.group(0).split("{")[0].strip() for m in _MEDIA_BLOCK_RE.finditer(source)
    )
    return PatternReport(
        margin=_count(_MARGIN_RE, source).most_common(top),
        padding=_count(_PADDING_RE, source).most_common(top),
        duplicate_media=[(q, n) for q, n in media.items() if n > media_threshold],
    )
