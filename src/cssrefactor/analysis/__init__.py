"""Stylesheet analysis: aggregate statistics and refactoring hints."""

from cssrefactor.analysis.patterns import PatternReport, find_patterns
from cssrefactor.analysis.stats import (
    CSSStats,
    compute_stats,
    selector_specificity,
    split_selectors,
)

__all__ = [
    "CSSStats",
    "PatternReport",
    "compute_stats",
    "find_patterns",
    "selector_specificity",
    "split_selectors",
]
