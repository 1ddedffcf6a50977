"""cssrefactor model layer -- public type re-exports."""

from cssrefactor.model.stylesheet import (
    AtRule,
    Declaration,
    MediaRule,
    Node,
    Rule,
    Stylesheet,
)

__all__ = [
    "Declaration",
    "Rule",
    "MediaRule",
    "AtRule",
    "Node",
    "Stylesheet",
]
