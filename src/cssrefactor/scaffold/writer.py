"""SCSS scaffold writer: directory layout, main entry file, and static templates."""

from __future__ import annotations

import logging
from pathlib import Path

from cssrefactor.config import SCSS_DIRECTORIES
from cssrefactor.files import ensure_dir, write_text

__all__ = [
    "TEMPLATES_DIR",
    "component_template",
    "mixins_template",
    "render_main",
    "write_scaffold",
]

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

# Imported first, in this order, from the base directory.
_BASE_IMPORTS = ("variables", "mixins", "reset", "typography")

_SAMPLE_COMPONENTS = ("buttons", "sections")
_FALLBACK_COMPONENT = "// Sample component file"


def _template(filename: str) -> str:
    return (TEMPLATES_DIR / filename).read_text(encoding="utf-8")


def mixins_template() -> str:
    return _template("_mixins.scss")


def component_template(name: str) -> str:
    """Return the sample SCSS for component *name*, or a placeholder comment."""
    if name not in _SAMPLE_COMPONENTS:
        return _FALLBACK_COMPONENT
    return _template(f"_{name}.scss")


def render_main(directories: tuple[str, ...] | list[str] = SCSS_DIRECTORIES) -> str:
    """Render ``main.scss``: base partials first, then one wildcard import per directory."""
    lines = ["// Main SCSS File", "", "// Base styles"]
    lines.extend(f'@import "base/{name}";' for name in _BASE_IMPORTS)
    lines.append("")
    for directory in directories:
        if directory == "base":
            continue
        lines.append(f"// {directory[:1].upper()}{directory[1:]}")
        lines.append(f'@import "{directory}/**/*";')
        lines.append("")
    return "\n".join(lines) + "\n"


def write_scaffold(
    variables_text: str,
    output_dir: str | Path,
    directories: tuple[str, ...] | list[str] = SCSS_DIRECTORIES,
) -> list[Path]:
    """Create the scaffold under *output_dir* and return the written file paths."""
    root = ensure_dir(output_dir)
    for directory in directories:
        ensure_dir(root / directory)

    files = [
        (root / "base" / "_variables.scss", variables_text),
        (root / "base" / "_mixins.scss", mixins_template()),
        (root / "main.scss", render_main(directories)),
    ]
    files.extend(
        (root / "components" / f"_{name}.scss", component_template(name))
        for name in _SAMPLE_COMPONENTS
    )

    written = []
    for path, text in files:
        ensure_dir(path.parent)
        written.append(write_text(path, text))
    logger.info("scaffold written to %s (%d files)", root, len(written))
    return written
