"""Entry point of the layout stage."""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from outlinemap.layout.shape import ShapePolicy
from outlinemap.layout.strategies import get_strategy
from outlinemap.layout.types import LayoutNode, LayoutOptions
from outlinemap.outline.nodes import OutlineNode, get_parent, to_networkx


@dataclass
class LayoutResult:
    """Positioned nodes plus the tree graph and shape policy they came from."""

    nodes: list[LayoutNode]
    graph: nx.DiGraph
    policy: ShapePolicy
    options: LayoutOptions

    @property
    def root(self) -> LayoutNode:
        return self.nodes[0]

    def by_id(self) -> dict[str, LayoutNode]:
        return {node.id: node for node in self.nodes}

    def edges(self) -> list[tuple[str, str]]:
        """(parent, child) pairs, one per non-root node, in node order."""
        return [(get_parent(self.graph, node.id), node.id) for node in self.nodes if not node.is_root]


def layout_outline(root: OutlineNode, options: LayoutOptions | None = None) -> LayoutResult:
    """Position every node of an outline tree.

    Args:
        root: Parsed outline
        options: Mode and compactness (defaults to a bidirectional, regular layout)

    Returns:
        LayoutResult with nodes ordered root first
    """
    options = options or LayoutOptions()
    graph = to_networkx(root)
    policy = ShapePolicy.from_graph(graph)
    nodes = get_strategy(options.mode).arrange(root, options, policy)
    return LayoutResult(nodes=nodes, graph=graph, policy=policy, options=options)
