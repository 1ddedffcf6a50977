"""Variable naming: bucket thresholds for spacing/breakpoints and the color palette."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from cssrefactor.config import KNOWN_PALETTE
from cssrefactor.extraction.values import ExtractedValueSet, pixel_magnitude

__all__ = [
    "NamedVariable",
    "VariableSet",
    "classify_spacing",
    "classify_breakpoint",
    "name_color",
    "name_variables",
]

# (inclusive upper bound, bucket); values above the last bound use the fallback.
_SPACING_BUCKETS: tuple[tuple[int, str], ...] = (
    (0, "none"),
    (4, "xs"),
    (8, "sm"),
    (16, "md"),
    (24, "lg"),
    (32, "xl"),
)
_SPACING_FALLBACK = "xxl"

_BREAKPOINT_BUCKETS: tuple[tuple[int, str], ...] = (
    (480, "mobile"),
    (768, "tablet"),
    (1024, "desktop"),
    (1280, "widescreen"),
)
_BREAKPOINT_FALLBACK = "ultrawide"


@dataclass(frozen=True)
class NamedVariable:
    """A generated SCSS variable: ``$name: value;``."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"${self.name}: {self.value};"


@dataclass(frozen=True)
class VariableSet:
    colors: tuple[NamedVariable, ...] = ()
    spacing: tuple[NamedVariable, ...] = ()
    breakpoints: tuple[NamedVariable, ...] = ()


def _bucket(size: int, buckets: tuple[tuple[int, str], ...], fallback: str) -> str:
    for upper, name in buckets:
        if size <= upper:
            return name
    return fallback


def classify_spacing(value: str | int) -> str:
    """Return the spacing bucket (``none`` .. ``xxl``) for a pixel value."""
    return _bucket(pixel_magnitude(value), _SPACING_BUCKETS, _SPACING_FALLBACK)


def classify_breakpoint(value: str | int) -> str:
    """Return the breakpoint bucket (``mobile`` .. ``ultrawide``) for a pixel value."""
    return _bucket(pixel_magnitude(value), _BREAKPOINT_BUCKETS, _BREAKPOINT_FALLBACK)


def name_color(
    value: str,
    index: int,
    palette: tuple[tuple[str, str], ...] = KNOWN_PALETTE,
) -> str:
    """Name a color by exact palette match, else ``color-<index + 1>``.

    *index* is the 0-based encounter position of *value*.
    """
    for known, name in palette:
        if value == known:
            return name
    return f"color-{index + 1}"


def _bucketed(prefix: str, values: tuple[str, ...], buckets: list[str]) -> tuple[NamedVariable, ...]:
    """Name each value after its bucket.

    A bucket holding more than one value suffixes each of its names with the
    value's position in the whole sorted sequence, so suffixes are not
    contiguous within a bucket.
    """
    counts = Counter(buckets)
    named = []
    for index, (value, bucket) in enumerate(zip(values, buckets)):
        name = f"{prefix}-{bucket}"
        if counts[bucket] > 1:
            name += f"-{index}"
        named.append(NamedVariable(name=name, value=value))
    return tuple(named)


def _named_colors(
    colors: tuple[str, ...], palette: tuple[tuple[str, str], ...]
) -> tuple[NamedVariable, ...]:
    named = []
    taken: set[str] = set()
    for index, value in enumerate(colors):
        name = name_color(value, index, palette)
        # e.g. both "#FFFFFF" and "#ffffff" present, or a palette name that
        # looks like an index name: take the first free color-<n> from index + 1.
        number = index + 1
        while name in taken:
            name = f"color-{number}"
            number += 1
        taken.add(name)
        named.append(NamedVariable(name=name, value=value))
    return tuple(named)


def name_variables(
    values: ExtractedValueSet,
    palette: tuple[tuple[str, str], ...] = KNOWN_PALETTE,
) -> VariableSet:
    """Assign a variable name to every extracted value."""
    return VariableSet(
        colors=_named_colors(values.colors, palette),
        spacing=_bucketed(
            "spacing", values.spacing, [classify_spacing(v) for v in values.spacing]
        ),
        breakpoints=_bucketed(
            "breakpoint",
            values.breakpoints,
            [classify_breakpoint(v) for v in values.breakpoints],
        ),
    )
