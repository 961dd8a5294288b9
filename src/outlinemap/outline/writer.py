"""Write label edits back into outline text.

Only the line that produced the node is rewritten. Its structural prefix
(indentation, bullet, heading markers and the whitespace between them) is
kept as written; everything after it is replaced by the new label.
"""

from __future__ import annotations

import logging

from outlinemap.exceptions import NodeNotFoundError
from outlinemap.outline.index import index_outline
from outlinemap.outline.parser import IdStrategy, classify_line

logger = logging.getLogger(__name__)


def rewrite_line(line: str, new_label: str) -> str:
    """Replace the label part of a single source line.

    Example:
        >>> rewrite_line("  - ## Old", "New")
        '  - ## New'
    """
    body = line.removesuffix("\r")
    parsed = classify_line(body)
    if parsed.label == new_label:
        return line

    text = body[len(parsed.prefix) :]
    trailing = text[len(text.rstrip()) :]
    line_ending = line[len(body) :]
    return f"{parsed.prefix}{new_label}{trailing}{line_ending}"


def update_node_label(
    text: str,
    node_id: str,
    new_label: str,
    *,
    id_strategy: IdStrategy | str = IdStrategy.POSITIONAL,
) -> str:
    """Rename one node by rewriting its source line.

    Args:
        text: Current outline text
        node_id: Id of the node, as produced by parsing ``text``
        new_label: Replacement label
        id_strategy: Strategy the id was produced with

    Returns:
        The full text with that single line changed

    Raises:
        NodeNotFoundError: ``node_id`` is not in the index rebuilt from ``text``

    Example:
        >>> update_node_label("# Topic\\n## Branch", "node-1", "NewName")
        '# Topic\\n## NewName'
    """
    index = index_outline(text, id_strategy=id_strategy)
    entry = index.get(node_id)
    if entry is None:
        logger.warning("Node %r not in outline (%d nodes indexed)", node_id, len(index))
        raise NodeNotFoundError(node_id, available=list(index))

    lines = text.split("\n")
    lines[entry.line_index] = rewrite_line(lines[entry.line_index], new_label)
    return "\n".join(lines)
