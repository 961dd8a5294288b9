"""Outline text parsing, indexing and round-trip editing."""

from outlinemap.outline.index import build_node_index, index_outline
from outlinemap.outline.nodes import (
    NodeIndexEntry,
    OutlineNode,
    empty_outline,
    get_children,
    get_parent,
    to_networkx,
)
from outlinemap.outline.parser import (
    IdStrategy,
    LineSyntax,
    ParsedLine,
    classify_line,
    parse_outline,
    sanitize_label,
)
from outlinemap.outline.writer import rewrite_line, update_node_label

__all__ = [
    "IdStrategy",
    "LineSyntax",
    "NodeIndexEntry",
    "OutlineNode",
    "ParsedLine",
    "build_node_index",
    "classify_line",
    "empty_outline",
    "get_children",
    "get_parent",
    "index_outline",
    "parse_outline",
    "rewrite_line",
    "sanitize_label",
    "to_networkx",
    "update_node_label",
]
