"""Adapter from the tinycss2 token tree to the cssrefactor stylesheet model.

Example:
    a { color: #e6ac55; margin: 8px 0; }
    @media (max-width: 768px) { a { padding: 4px; } }
"""

from __future__ import annotations

import logging

import tinycss2
import tinycss2.ast

from cssrefactor.errors import ParseError
from cssrefactor.model.stylesheet import AtRule, Declaration, MediaRule, Node, Rule, Stylesheet

__all__ = ["parse_css"]

logger = logging.getLogger(__name__)

# At-rules whose block holds ordinary style rules.
_GROUPING_AT_RULES = {"supports", "document", "-moz-document", "layer", "container", "scope"}


def _serialize(tokens) -> str:
    return tinycss2.serialize(tokens).strip()


def _parse_declarations(content) -> tuple[Declaration, ...]:
    """Parse the body of a style rule, skipping malformed declarations.

    Nested rules (``&:hover { ... }``) are dropped without disturbing the
    declarations that follow them.
    """
    declarations: list[Declaration] = []
    items = tinycss2.parse_blocks_contents(
        content, skip_comments=True, skip_whitespace=True
    )
    for item in items:
        if isinstance(item, tinycss2.ast.Declaration):
            value = _serialize(item.value)
            if item.important:
                value += " !important"
            declarations.append(Declaration(property=item.name, value=value))
        elif isinstance(item, tinycss2.ast.ParseError):
            logger.debug(
                "skipping malformed declaration at %s:%s: %s",
                item.source_line,
                item.source_column,
                item.message,
            )
    return tuple(declarations)


def _parse_style_rule(rule: tinycss2.ast.QualifiedRule) -> Rule:
    return Rule(
        selector=_serialize(rule.prelude),
        declarations=_parse_declarations(rule.content),
    )


def _parse_nested_rules(content) -> tuple[Rule, ...]:
    """Parse the block of an at-rule into its nested style rules."""
    if content is None:
        return ()
    rules: list[Rule] = []
    for item in tinycss2.parse_rule_list(content, skip_comments=True, skip_whitespace=True):
        if isinstance(item, tinycss2.ast.QualifiedRule):
            rules.append(_parse_style_rule(item))
        elif isinstance(item, tinycss2.ast.ParseError):
            logger.debug(
                "skipping malformed nested rule at %s:%s: %s",
                item.source_line,
                item.source_column,
                item.message,
            )
    return tuple(rules)


def _parse_at_rule(rule: tinycss2.ast.AtRule) -> Node:
    prelude = _serialize(rule.prelude)
    keyword = rule.lower_at_keyword
    if keyword == "media":
        return MediaRule(condition=prelude, rules=_parse_nested_rules(rule.content))
    if keyword in _GROUPING_AT_RULES:
        return AtRule(keyword=keyword, prelude=prelude, rules=_parse_nested_rules(rule.content))
    # @font-face, @keyframes, @page, @import ... stay opaque.
    return AtRule(keyword=keyword, prelude=prelude)


def parse_css(source: str) -> Stylesheet:
    """Parse CSS source text into a :class:`Stylesheet`.

    Raises :class:`ParseError` when a top-level construct cannot be parsed
    (for example a selector with no declaration block).
    """
    nodes: list[Node] = []
    for item in tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True):
        if isinstance(item, tinycss2.ast.QualifiedRule):
            nodes.append(_parse_style_rule(item))
        elif isinstance(item, tinycss2.ast.AtRule):
            nodes.append(_parse_at_rule(item))
        elif isinstance(item, tinycss2.ast.ParseError):
            raise ParseError(item.message, line=item.source_line, column=item.source_column)
    logger.debug("parsed %d top-level rules", len(nodes))
    return Stylesheet(rules=tuple(nodes))
