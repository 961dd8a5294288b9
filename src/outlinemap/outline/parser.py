"""Parse outline text into an OutlineNode tree.

Three line syntaxes are recognised, checked in this order:

    - ## Heading      bullet followed by heading markers, level = marks - 1
    ## Heading        heading markers,                    level = marks - 1
      - Item          bullet,                             level = indent // 2 + 1

Any other non-blank line becomes a level-0 node. Blank lines are skipped
but still count towards line indices.
"""

from __future__ import annotations

import hashlib
import logging
import re
from collections import Counter
from dataclasses import dataclass
from enum import Enum

from outlinemap.outline.nodes import OutlineNode, empty_outline

logger = logging.getLogger(__name__)

_BULLET_HEADING = re.compile(r"^(?P<prefix>(?P<indent>\s*)-\s+(?P<marks>#+)\s*)(?P<text>.*)$")
_HEADING = re.compile(r"^(?P<prefix>(?P<indent>\s*)(?P<marks>#+)\s*)(?P<text>.*)$")
_BULLET = re.compile(r"^(?P<prefix>(?P<indent>\s*)-\s*)(?P<text>.*)$")
_PLAIN = re.compile(r"^(?P<prefix>(?P<indent>\s*))(?P<text>.*)$")

_LINK = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_EMPHASIS = re.compile(r"(\*\*|__)(.+?)\1")
_CODE = re.compile(r"`([^`]*)`")

INDENT_WIDTH = 2


class LineSyntax(Enum):
    BULLET_HEADING = "bullet_heading"
    HEADING = "heading"
    BULLET = "bullet"
    PLAIN = "plain"


class IdStrategy(Enum):
    """How node ids are derived.

    POSITIONAL ids (``node-<line>``) change when lines are inserted above a
    node. CONTENT_PATH ids hash the chain of ancestor labels instead, so they
    survive edits elsewhere in the document but change when an ancestor is
    renamed.
    """

    POSITIONAL = "positional"
    CONTENT_PATH = "content_path"

    @classmethod
    def parse(cls, value: str | IdStrategy) -> IdStrategy:
        if isinstance(value, IdStrategy):
            return value
        try:
            return cls(value.strip().lower().replace("-", "_"))
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown id strategy '{value}'. Choose one of: {choices}") from None


@dataclass(frozen=True)
class ParsedLine:
    """Structural reading of one source line.

    ``prefix`` is the exact leading text (indentation and markers, with the
    original whitespace) that precedes the label.
    """

    syntax: LineSyntax
    level: int
    prefix: str
    label: str


def sanitize_label(text: str) -> str:
    """Reduce inline markdown to plain text.

    Example:
        >>> sanitize_label("  **Bold** and [link](https://x.y) `code` ")
        'Bold and link code'
    """
    text = _LINK.sub(r"\1", text)
    text = _EMPHASIS.sub(r"\2", text)
    text = _CODE.sub(r"\1", text)
    return text.strip()


def _indent_width(indent: str) -> int:
    return len(indent.expandtabs(INDENT_WIDTH))


def classify_line(line: str) -> ParsedLine:
    """Classify a single source line. The line must not contain a newline."""
    stripped = line.strip()

    match = _BULLET_HEADING.match(line)
    if match and stripped.startswith("-"):
        return ParsedLine(
            LineSyntax.BULLET_HEADING,
            len(match["marks"]) - 1,
            match["prefix"],
            sanitize_label(match["text"]),
        )

    if stripped.startswith("#"):
        match = _HEADING.match(line)
        return ParsedLine(
            LineSyntax.HEADING,
            len(match["marks"]) - 1,
            match["prefix"],
            sanitize_label(match["text"]),
        )

    if stripped.startswith("-"):
        match = _BULLET.match(line)
        return ParsedLine(
            LineSyntax.BULLET,
            _indent_width(match["indent"]) // INDENT_WIDTH + 1,
            match["prefix"],
            sanitize_label(match["text"]),
        )

    match = _PLAIN.match(line)
    return ParsedLine(LineSyntax.PLAIN, 0, match["prefix"], sanitize_label(match["text"]))


def _content_path_id(path: list[str], seen: Counter[str]) -> str:
    digest = hashlib.sha1("\x1f".join(path).encode("utf-8")).hexdigest()[:12]
    seen[digest] += 1
    if seen[digest] == 1:
        return f"node-{digest}"
    return f"node-{digest}-{seen[digest] - 1}"


def parse_outline(text: str, *, id_strategy: IdStrategy | str = IdStrategy.POSITIONAL) -> OutlineNode:
    """Parse outline text into a tree.

    A node attaches to the nearest preceding node whose level is smaller
    than its own, so skipped levels are accepted: ``# A`` followed by
    ``#### D`` makes D a child of A at depth 1.

    Args:
        text: Newline-separated outline text
        id_strategy: How node ids are derived (see IdStrategy)

    Returns:
        The first top-level node, or an "Empty" placeholder when the text
        has no content. Never raises on malformed input.

    Example:
        >>> root = parse_outline("# A\\n## B\\n### C")
        >>> [(n.label, n.depth) for n in root.walk()]
        [('A', 0), ('B', 1), ('C', 2)]
    """
    strategy = IdStrategy.parse(id_strategy)
    sentinel = OutlineNode(id="__root__", label="", depth=-1, level=-1)
    stack: list[OutlineNode] = [sentinel]
    seen: Counter[str] = Counter()

    for line_index, line in enumerate(text.split("\n")):
        if not line.strip():
            continue

        parsed = classify_line(line)

        while len(stack) > 1 and stack[-1].level >= parsed.level:
            stack.pop()
        parent = stack[-1]

        if strategy is IdStrategy.POSITIONAL:
            node_id = f"node-{line_index}"
        else:
            path = [n.label for n in stack[1:]] + [parsed.label]
            node_id = _content_path_id(path, seen)

        node = OutlineNode(
            id=node_id,
            label=parsed.label,
            depth=parent.depth + 1,
            level=parsed.level,
            line_index=line_index,
        )
        parent.children.append(node)
        stack.append(node)

    if not sentinel.children:
        return empty_outline()

    if len(sentinel.children) > 1:
        ignored = sentinel.children[1:]
        logger.warning(
            "Outline has %d top-level nodes; only '%s' is shown, ignoring %d (first at line %d)",
            len(sentinel.children),
            sentinel.children[0].label,
            len(ignored),
            ignored[0].line_index + 1,
        )

    return sentinel.children[0]
