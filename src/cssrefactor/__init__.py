"""cssrefactor: CSS analysis, minification and SCSS scaffolding tools."""

__version__ = "0.1.0"
