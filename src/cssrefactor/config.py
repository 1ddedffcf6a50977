"""Tool defaults: input/output paths, scaffold layout, report limits, and the color palette."""

from __future__ import annotations

from dataclasses import dataclass

# Exact-match color values that get a semantic variable name.  Consulted in
# order before falling back to the indexed ``color-N`` default.
KNOWN_PALETTE: tuple[tuple[str, str], ...] = (
    ("#0d0c0d", "color-dark"),
    ("#f0f0f0", "color-light"),
    ("#e6ac55", "color-accent"),
    ("#FFFFFF", "color-white"),
    ("#ffffff", "color-white"),
)

SCSS_DIRECTORIES: tuple[str, ...] = ("base", "components", "layout", "utilities")


@dataclass(frozen=True)
class ToolConfig:
    analyze_input: str = "css/styles.css"
    optimize_input: str = "css/styles.css"
    optimize_output: str = "css/optimized.css"
    convert_input: str = "css/optimized.css"
    scss_output: str = "scss"
    scss_directories: tuple[str, ...] = SCSS_DIRECTORIES
    palette: tuple[tuple[str, str], ...] = KNOWN_PALETTE
    top_properties: int = 10
    top_patterns: int = 5
    duplicate_media_threshold: int = 2  # report queries seen more often than this


DEFAULT_CONFIG = ToolConfig()
