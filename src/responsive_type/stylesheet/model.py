"""Stylesheet model: a mutable CSS node tree with parent links.

The tree mirrors what a CSS post-processor needs: rules and at-rules hold
child nodes, declarations are leaves, and every node knows its parent so it
can remove or replace itself while a traversal is in progress.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


class Node:
    """Base class for every node in the tree."""

    parent: Container | None = None
    line: int | None
    column: int | None

    def remove(self) -> None:
        """Detach this node from its parent (no-op when already detached)."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def replace_with(self, node: Node) -> Node:
        """Put *node* where this node is and detach this node."""
        parent = self.parent
        if parent is None:
            raise ValueError("cannot replace a node that has no parent")
        parent.insert_after(self, node)
        self.remove()
        return node

    def clone(self) -> Node:
        raise NotImplementedError

    @property
    def root(self) -> Node:
        node: Node = self
        while node.parent is not None:
            node = node.parent
        return node


class Container(Node):
    """A node that owns an ordered list of child nodes."""

    nodes: list[ChildNode] | None

    def _adopt(self) -> None:
        for child in self.nodes or []:
            child.parent = self

    def _children(self) -> list[ChildNode]:
        if self.nodes is None:
            raise ValueError(f"{type(self).__name__} has no block to hold children")
        return self.nodes

    def __iter__(self) -> Iterator[ChildNode]:
        return iter(list(self.nodes or []))

    def index(self, child: Node) -> int:
        for i, node in enumerate(self._children()):
            if node is child:
                return i
        raise ValueError("node is not a child of this container")

    def append(self, node: ChildNode) -> ChildNode:
        node.remove()
        self._children().append(node)
        node.parent = self
        return node

    def insert_after(self, anchor: Node, node: ChildNode) -> ChildNode:
        node.remove()
        children = self._children()
        children.insert(self.index(anchor) + 1, node)
        node.parent = self
        return node

    def insert_before(self, anchor: Node, node: ChildNode) -> ChildNode:
        node.remove()
        children = self._children()
        children.insert(self.index(anchor), node)
        node.parent = self
        return node

    def remove_child(self, child: Node) -> None:
        del self._children()[self.index(child)]
        child.parent = None

    # --- traversal ------------------------------------------------------------

    def walk(self) -> Iterator[ChildNode]:
        """Yield every descendant depth-first, in document order.

        Children are snapshotted per container, so nodes inserted during
        iteration are not visited and removed nodes are still yielded
        (check ``node.parent`` to detect them).
        """
        for child in list(self.nodes or []):
            yield child
            if isinstance(child, Container):
                yield from child.walk()

    def walk_rules(self) -> Iterator[Rule]:
        for node in self.walk():
            if isinstance(node, Rule):
                yield node

    def walk_decls(self, prop: str | None = None) -> Iterator[Declaration]:
        for node in self.walk():
            if isinstance(node, Declaration) and (prop is None or node.prop == prop):
                yield node

    def declarations(self, prop: str | None = None) -> list[Declaration]:
        """Direct child declarations, optionally filtered by property name."""
        return [
            node
            for node in self.nodes or []
            if isinstance(node, Declaration) and (prop is None or node.prop == prop)
        ]


@dataclass(eq=False)
class Declaration(Node):
    """A single ``prop: value`` pair."""

    prop: str
    value: str
    important: bool = False
    line: int | None = None
    column: int | None = None

    def clone(self) -> Declaration:
        return Declaration(
            prop=self.prop,
            value=self.value,
            important=self.important,
            line=self.line,
            column=self.column,
        )


@dataclass(eq=False)
class Comment(Node):
    """A ``/* ... */`` comment; ``text`` excludes the delimiters."""

    text: str
    line: int | None = None
    column: int | None = None

    def clone(self) -> Comment:
        return Comment(text=self.text, line=self.line, column=self.column)


@dataclass(eq=False)
class Rule(Container):
    """A style rule: a selector followed by a block of child nodes."""

    selector: str
    nodes: list[ChildNode] = field(default_factory=list)
    line: int | None = None
    column: int | None = None

    def __post_init__(self) -> None:
        self._adopt()

    def clone(self) -> Rule:
        return Rule(
            selector=self.selector,
            nodes=[n.clone() for n in self.nodes],
            line=self.line,
            column=self.column,
        )


@dataclass(eq=False)
class AtRule(Container):
    """An at-rule such as ``@media``; ``nodes`` is None for statement at-rules."""

    name: str
    params: str = ""
    nodes: list[ChildNode] | None = None
    line: int | None = None
    column: int | None = None

    def __post_init__(self) -> None:
        self._adopt()

    def clone(self) -> AtRule:
        return AtRule(
            name=self.name,
            params=self.params,
            nodes=None if self.nodes is None else [n.clone() for n in self.nodes],
            line=self.line,
            column=self.column,
        )


@dataclass(eq=False)
class Root(Container):
    """The top of a parsed stylesheet."""

    nodes: list[ChildNode] = field(default_factory=list)
    line: int | None = None
    column: int | None = None

    def __post_init__(self) -> None:
        self._adopt()

    def clone(self) -> Root:
        return Root(nodes=[n.clone() for n in self.nodes])


ChildNode = Union[Rule, AtRule, Declaration, Comment]
