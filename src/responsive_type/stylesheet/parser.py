"""Build the stylesheet node tree from CSS text.

Tokenising and block matching are delegated to tinycss2; this module only
maps its rules and declarations onto :mod:`responsive_type.stylesheet.model`.

Example::

    html { font-size: 20px; }
    h1 { font-size: responsive 14px 40px; font-range: 420px 1280px; }
"""

from __future__ import annotations

import tinycss2
import tinycss2.ast

from responsive_type.errors import StylesheetParseError
from responsive_type.stylesheet.model import (
    AtRule,
    ChildNode,
    Comment,
    Declaration,
    Root,
    Rule,
)

__all__ = ["parse_stylesheet"]

# At-rules whose block holds rules rather than declarations.
_RULE_LIST_AT_RULES = frozenset({
    "media",
    "supports",
    "document",
    "layer",
    "container",
    "scope",
    "starting-style",
})


def _raise(error: tinycss2.ast.ParseError) -> None:
    raise StylesheetParseError(
        error.message, line=error.source_line, column=error.source_column
    )


def _text(tokens: list) -> str:
    return tinycss2.serialize(tokens).strip()


def _convert_declaration(decl: tinycss2.ast.Declaration) -> Declaration:
    # Custom properties are case-sensitive; everything else is normalised.
    prop = decl.name if decl.name.startswith("--") else decl.lower_name
    return Declaration(
        prop=prop,
        value=_text(decl.value),
        important=decl.important,
        line=decl.source_line,
        column=decl.source_column,
    )


def _convert_rule(rule: tinycss2.ast.QualifiedRule) -> Rule:
    children = tinycss2.parse_blocks_contents(
        rule.content, skip_whitespace=True
    )
    return Rule(
        selector=_text(rule.prelude),
        nodes=_convert_all(children),
        line=rule.source_line,
        column=rule.source_column,
    )


def _convert_at_rule(rule: tinycss2.ast.AtRule) -> AtRule:
    nodes: list[ChildNode] | None = None
    if rule.content is not None:
        if rule.lower_at_keyword in _RULE_LIST_AT_RULES:
            children = tinycss2.parse_rule_list(rule.content, skip_whitespace=True)
        else:
            children = tinycss2.parse_blocks_contents(
                rule.content, skip_whitespace=True
            )
        nodes = _convert_all(children)
    return AtRule(
        name=rule.lower_at_keyword,
        params=_text(rule.prelude),
        nodes=nodes,
        line=rule.source_line,
        column=rule.source_column,
    )


def _convert_all(items: list) -> list[ChildNode]:
    nodes: list[ChildNode] = []
    for item in items:
        if item.type == "error":
            _raise(item)
        elif item.type == "declaration":
            nodes.append(_convert_declaration(item))
        elif item.type == "qualified-rule":
            nodes.append(_convert_rule(item))
        elif item.type == "at-rule":
            nodes.append(_convert_at_rule(item))
        elif item.type == "comment":
            nodes.append(
                Comment(
                    text=item.value, line=item.source_line, column=item.source_column
                )
            )
        # Stray whitespace and ';' literals carry no meaning in the tree.
    return nodes


def parse_stylesheet(source: str) -> Root:
    """Parse CSS *source* into a :class:`Root`.

    Raises :class:`StylesheetParseError` on the first malformed rule or
    declaration.
    """
    items = tinycss2.parse_stylesheet(source, skip_whitespace=True)
    return Root(nodes=_convert_all(items))
