"""Render named variables as the text of ``_variables.scss``."""

from __future__ import annotations

from cssrefactor.config import KNOWN_PALETTE
from cssrefactor.extraction.naming import NamedVariable, name_variables
from cssrefactor.extraction.values import ExtractedValueSet

__all__ = ["render"]


def _section(title: str, variables: tuple[NamedVariable, ...]) -> str:
    lines = [f"// {title}"]
    lines.extend(str(v) for v in variables)
    return "\n".join(lines) + "\n"


def render(
    values: ExtractedValueSet,
    palette: tuple[tuple[str, str], ...] = KNOWN_PALETTE,
) -> str:
    """Render colors, spacing, and breakpoints as three titled sections."""
    variables = name_variables(values, palette)
    sections = [
        _section("Color Variables", variables.colors),
        _section("Spacing Variables", variables.spacing),
        _section("Breakpoint Variables", variables.breakpoints),
    ]
    return "\n".join(sections)
