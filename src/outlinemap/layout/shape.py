"""Box-or-dot shape policy.

Nodes down to the cutoff depth are drawn as labelled boxes. One level
deeper, a node keeps its box only while it has children of its own; below
that every node is a small dot. The same classification drives sibling
separation, so it is computed once per layout and shared.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from outlinemap.outline.nodes import get_children

SHAPE_CUTOFF_DEPTH = 2


def _has_rectangle(G: nx.DiGraph, node_id: str, cutoff: int) -> bool:
    depth = G.nodes[node_id]["depth"]
    if depth <= cutoff:
        return True
    if depth == cutoff + 1:
        return any(G.nodes[child]["depth"] == cutoff + 2 for child in get_children(G, node_id))
    return False


@dataclass(frozen=True)
class ShapePolicy:
    """Precomputed shape classification for one tree.

    Attributes:
        rectangles: Ids of nodes drawn as boxes
        deep: Ids of nodes with at least one child deeper than the cutoff
        cutoff_depth: Deepest level that is always boxed
    """

    rectangles: frozenset[str]
    deep: frozenset[str]
    cutoff_depth: int = SHAPE_CUTOFF_DEPTH

    @classmethod
    def from_graph(cls, G: nx.DiGraph, cutoff_depth: int = SHAPE_CUTOFF_DEPTH) -> ShapePolicy:
        rectangles = frozenset(n for n in G.nodes if _has_rectangle(G, n, cutoff_depth))
        deep = frozenset(
            n
            for n in G.nodes
            if any(G.nodes[child]["depth"] > cutoff_depth for child in get_children(G, n))
        )
        return cls(rectangles=rectangles, deep=deep, cutoff_depth=cutoff_depth)

    def has_rectangle(self, node_id: str) -> bool:
        return node_id in self.rectangles

    def has_deep_children(self, node_id: str) -> bool:
        return node_id in self.deep
