"""Extraction engine: turn stylesheet declarations into named SCSS variables."""

from cssrefactor.extraction.naming import (
    NamedVariable,
    VariableSet,
    classify_breakpoint,
    classify_spacing,
    name_color,
    name_variables,
)
from cssrefactor.extraction.render import render
from cssrefactor.extraction.values import ExtractedValueSet, extract, pixel_magnitude

__all__ = [
    "ExtractedValueSet",
    "NamedVariable",
    "VariableSet",
    "extract",
    "pixel_magnitude",
    "classify_spacing",
    "classify_breakpoint",
    "name_color",
    "name_variables",
    "render",
]
