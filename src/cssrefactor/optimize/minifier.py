"""CSS minification via rcssmin, with size statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import rcssmin

__all__ = ["MinifyResult", "minify"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MinifyResult:
    """Minified text plus before/after sizes in UTF-8 bytes."""

    styles: str
    original_size: int
    minified_size: int

    @property
    def efficiency(self) -> float:
        """Fraction of the original size removed (0.0 for empty input)."""
        if not self.original_size:
            return 0.0
        return 1 - self.minified_size / self.original_size


def minify(css: str, keep_bang_comments: bool = False) -> MinifyResult:
    """Minify *css*; ``/*! ... */`` comments survive when *keep_bang_comments* is set."""
    styles = rcssmin.cssmin(css, keep_bang_comments=keep_bang_comments)
    result = MinifyResult(
        styles=styles,
        original_size=len(css.encode("utf-8")),
        minified_size=len(styles.encode("utf-8")),
    )
    logger.debug(
        "minified %d -> %d bytes (%.2f%%)",
        result.original_size,
        result.minified_size,
        result.efficiency * 100,
    )
    return result
