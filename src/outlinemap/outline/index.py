"""Map node ids back to their source lines."""

from __future__ import annotations

from outlinemap.outline.nodes import NodeIndexEntry, OutlineNode
from outlinemap.outline.parser import IdStrategy, parse_outline


def build_node_index(root: OutlineNode) -> dict[str, NodeIndexEntry]:
    """Record line index, depth and label for every node of a parsed tree.

    The empty placeholder has no source line and is left out. The index is
    only valid for the text the tree was parsed from.
    """
    index: dict[str, NodeIndexEntry] = {}
    for node in root.walk():
        if node.line_index is None:
            continue
        index[node.id] = NodeIndexEntry(
            line_index=node.line_index,
            depth=node.depth,
            label=node.label,
        )
    return index


def index_outline(
    text: str,
    *,
    id_strategy: IdStrategy | str = IdStrategy.POSITIONAL,
) -> dict[str, NodeIndexEntry]:
    """Parse text and index the resulting tree in one step."""
    return build_node_index(parse_outline(text, id_strategy=id_strategy))
