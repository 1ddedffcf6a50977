"""Value extraction: pull color, spacing, and breakpoint tokens out of a stylesheet."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from cssrefactor.model.stylesheet import Declaration, MediaRule, Rule, Stylesheet

__all__ = ["ExtractedValueSet", "extract", "pixel_magnitude"]

_COLOR_RE = re.compile(r"#[0-9a-fA-F]{3,6}|rgba?\([^)]+\)")
_PIXEL_RE = re.compile(r"\d+px")
_DIGITS_RE = re.compile(r"\d+")

_COLOR_PROPERTIES = ("color", "background", "border")
_SPACING_PROPERTIES = ("margin", "padding")


@dataclass(frozen=True)
class ExtractedValueSet:
    """Raw tokens found in a stylesheet, deduplicated by exact string.

    Colors keep encounter order; spacing and breakpoints ascend by their
    pixel magnitude.
    """

    colors: tuple[str, ...] = ()
    spacing: tuple[str, ...] = ()
    breakpoints: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.colors) + len(self.spacing) + len(self.breakpoints)


def pixel_magnitude(token: str | int) -> int:
    """Return the integer embedded at the start of a ``<n>px`` token."""
    if isinstance(token, int):
        return token
    match = _DIGITS_RE.match(token.strip())
    return int(match.group(0)) if match else 0


def _first_match(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(0) if match else None


def _unique(tokens: Iterable[str | None]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(t for t in tokens if t is not None))


def _by_magnitude(tokens: tuple[str, ...]) -> tuple[str, ...]:
    # sorted() is stable, so equal magnitudes keep discovery order.
    return tuple(sorted(tokens, key=pixel_magnitude))


def _property_has(declaration: Declaration, needles: tuple[str, ...]) -> bool:
    name = declaration.property.lower()
    return any(needle in name for needle in needles)


def _plain_declarations(stylesheet: Stylesheet) -> Iterator[Declaration]:
    for node in stylesheet.rules:
        if isinstance(node, Rule):
            yield from node.declarations


def extract(stylesheet: Stylesheet) -> ExtractedValueSet:
    """Collect color, spacing, and breakpoint tokens from *stylesheet*.

    Only the first token per declaration or media condition is taken.
    Declarations inside at-rules contribute nothing; media rules contribute
    only their condition.
    """
    declarations = list(_plain_declarations(stylesheet))
    colors = _unique(
        _first_match(_COLOR_RE, d.value)
        for d in declarations
        if _property_has(d, _COLOR_PROPERTIES)
    )
    spacing = _unique(
        _first_match(_PIXEL_RE, d.value)
        for d in declarations
        if _property_has(d, _SPACING_PROPERTIES)
    )
    breakpoints = _unique(
        _first_match(_PIXEL_RE, node.condition)
        for node in stylesheet.rules
        if isinstance(node, MediaRule)
    )
    return ExtractedValueSet(
        colors=colors,
        spacing=_by_magnitude(spacing),
        breakpoints=_by_magnitude(breakpoints),
    )
