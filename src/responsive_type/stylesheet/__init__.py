from responsive_type.stylesheet.model import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    Root,
    Rule,
)
from responsive_type.stylesheet.parser import parse_stylesheet
from responsive_type.stylesheet.serializer import serialize

__all__ = [
    "parse_stylesheet",
    "serialize",
    "Node",
    "Container",
    "Root",
    "Rule",
    "AtRule",
    "Declaration",
    "Comment",
]
