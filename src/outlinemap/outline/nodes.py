"""Outline tree types and traversal utilities."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

import networkx as nx

EMPTY_NODE_ID = "empty"
EMPTY_LABEL = "Empty"


@dataclass
class OutlineNode:
    """One entry of a parsed outline.

    Attributes:
        id: Identifier, unique within one parse
        label: Plain-text label (markup removed)
        depth: Distance from the root (root is 0)
        level: Depth implied by the line's own markers; equals depth unless
            the source skipped levels
        children: Child nodes in source order
        line_index: Zero-based index into the original line array, or None
            for the empty placeholder
    """

    id: str
    label: str
    depth: int
    level: int = 0
    children: list[OutlineNode] = field(default_factory=list)
    line_index: int | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.line_index is None and self.id == EMPTY_NODE_ID

    def walk(self) -> Iterator[OutlineNode]:
        """Yield this node and every descendant in pre-order."""
        stack = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def breadth_first(self) -> Iterator[OutlineNode]:
        """Yield this node and every descendant level by level."""
        queue = deque([self])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(current.children)

    def with_children(self, children: list[OutlineNode]) -> OutlineNode:
        """Shallow copy of this node carrying only the given children."""
        return OutlineNode(
            id=self.id,
            label=self.label,
            depth=self.depth,
            level=self.level,
            children=list(children),
            line_index=self.line_index,
        )


def empty_outline() -> OutlineNode:
    """Placeholder returned when the text holds no outline content."""
    return OutlineNode(id=EMPTY_NODE_ID, label=EMPTY_LABEL, depth=0, level=0)


@dataclass(frozen=True)
class NodeIndexEntry:
    """Where a node came from in the source text."""

    line_index: int
    depth: int
    label: str


def to_networkx(root: OutlineNode) -> nx.DiGraph:
    """Export the outline as a directed tree graph.

    Nodes carry ``depth``, ``label`` and ``line_index`` attributes; edges
    point from parent to child. Successor order follows source order.

    Example:
        >>> root = OutlineNode("node-0", "A", 0, children=[OutlineNode("node-1", "B", 1)])
        >>> list(to_networkx(root).edges())
        [('node-0', 'node-1')]
    """
    G = nx.DiGraph(root=root.id)
    for node in root.walk():
        G.add_node(node.id, depth=node.depth, label=node.label, line_index=node.line_index)
    for node in root.walk():
        for child in node.children:
            G.add_edge(node.id, child.id)
    return G


def get_children(G: nx.DiGraph, parent_id: str) -> list[str]:
    """Get direct children of a node, in source order."""
    return list(G.successors(parent_id))


def get_parent(G: nx.DiGraph, node_id: str) -> str | None:
    """Get the parent of a node, or None for the root."""
    return next(iter(G.predecessors(node_id)), None)
