"""Stylesheet model: Declaration, Rule, MediaRule, AtRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair inside a rule."""

    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value}"


@dataclass(frozen=True)
class Rule:
    """A selector plus its declarations, in source order."""

    selector: str
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True)
class MediaRule:
    """An ``@media`` block: the condition text and the rules it gates."""

    condition: str
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class AtRule:
    """Any other at-rule (``@font-face``, ``@keyframes``, ``@import``...).

    ``rules`` holds nested style rules for block at-rules such as
    ``@supports``; it is empty for statement at-rules.
    """

    keyword: str
    prelude: str = ""
    rules: tuple[Rule, ...] = ()


Node = Union[Rule, MediaRule, AtRule]


@dataclass(frozen=True)
class Stylesheet:
    """A parsed stylesheet: top-level nodes in source order."""

    rules: tuple[Node, ...] = field(default_factory=tuple)

    def style_rules(self) -> Iterator[Rule]:
        """Yield every style rule, including those nested in at-rules."""
        for node in self.rules:
            if isinstance(node, Rule):
                yield node
            else:
                yield from node.rules

    @property
    def media_rules(self) -> list[MediaRule]:
        return [node for node in self.rules if isinstance(node, MediaRule)]
