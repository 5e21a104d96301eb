"""Write a stylesheet node tree back to CSS text."""

from __future__ import annotations

from responsive_type.stylesheet.model import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    Root,
    Rule,
)

__all__ = ["serialize"]


def _declaration(decl: Declaration) -> str:
    important = " !important" if decl.important else ""
    return f"{decl.prop}: {decl.value}{important};"


def _block(head: str, container: Container, depth: int, indent: str) -> list[str]:
    pad = indent * depth
    lines = [f"{pad}{head} {{"]
    for child in container.nodes or []:
        lines.extend(_lines(child, depth + 1, indent))
    lines.append(f"{pad}}}")
    return lines


def _lines(node: Node, depth: int, indent: str) -> list[str]:
    pad = indent * depth
    if isinstance(node, Declaration):
        return [pad + _declaration(node)]
    if isinstance(node, Comment):
        return [f"{pad}/*{node.text}*/"]
    if isinstance(node, Rule):
        return _block(node.selector, node, depth, indent)
    if isinstance(node, AtRule):
        head = f"@{node.name} {node.params}" if node.params else f"@{node.name}"
        if node.nodes is None:
            return [f"{pad}{head};"]
        return _block(head, node, depth, indent)
    if isinstance(node, Root):
        lines: list[str] = []
        for child in node.nodes:
            lines.extend(_lines(child, depth, indent))
        return lines
    raise TypeError(f"Cannot serialize {type(node).__name__}")


def serialize(node: Node, indent: int = 4) -> str:
    """Serialize *node* (usually a :class:`Root`) to CSS text.

    Every declaration, comment and block delimiter goes on its own line,
    nested ``indent`` spaces per level.  A non-empty result ends in a newline.
    """
    lines = _lines(node, 0, " " * indent)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
