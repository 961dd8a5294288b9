"""Node box sizing.

Box dimensions are memoized per (id, label, compactness) in a cache owned
by the render session, so re-rendering the same document after a viewport
or colour change reuses the sizes it had before. Entries for nodes that
left the document are kept until the session moves to another document.
"""

from __future__ import annotations

from dataclasses import dataclass

from outlinemap.cache import CacheBackend, InMemoryCache
from outlinemap.layout.types import LayoutNode, Side
from outlinemap.viz.geometry import Box
from outlinemap.viz.text import AVG_CHAR_WIDTH, BASELINE_DY_EM, LINE_HEIGHT_EM, WrappedLabel, wrap_label

# Font size the average character width was measured at
BASE_FONT_PX = 14

# Horizontal gap between a dot and its label
DOT_LABEL_GAP = 10


@dataclass(frozen=True)
class Padding:
    horizontal: float
    vertical: float


# (regular, compact) padding by depth; deeper levels use the last entry
_PADDING: list[tuple[Padding, Padding]] = [
    (Padding(24, 14), Padding(28, 16)),
    (Padding(20, 12), Padding(24, 14)),
    (Padding(14, 10), Padding(18, 12)),
    (Padding(12, 8), Padding(16, 10)),
]


def max_label_width(depth: int, compact: bool, has_children: bool) -> int:
    """Wrap width for a boxed label.

    Childless nodes at depth 2 and below get extra width because no branch
    follows them.
    """
    if depth == 0:
        return 240 if compact else 200
    if depth == 1:
        return 220 if compact else 180
    if depth == 2:
        if not has_children:
            return 220 if compact else 180
        return 180 if compact else 140
    if not has_children:
        return 200 if compact else 160
    return 160 if compact else 120


def font_size(depth: int, compact: bool) -> int:
    if compact:
        return {0: 20, 1: 16}.get(depth, 14)
    return 18 if depth == 0 else 14


def font_weight(depth: int) -> str:
    return "bold" if depth <= 1 else "normal"


def box_padding(depth: int, compact: bool) -> Padding:
    regular, small_screen = _PADDING[min(depth, len(_PADDING) - 1)]
    return small_screen if compact else regular


def dot_radius(depth: int, compact: bool) -> float:
    if depth >= 4:
        return 6 if compact else 5
    return 5 if compact else 4


def text_extent(label: WrappedLabel, font_px: float) -> Box:
    """Estimated bounding box of a wrapped label."""
    widest = max((len(line) for line in label.lines), default=0)
    width = widest * AVG_CHAR_WIDTH * font_px / BASE_FONT_PX
    height = label.line_count * LINE_HEIGHT_EM * font_px
    return Box(width=width, height=height)


def dot_label(node: LayoutNode) -> WrappedLabel:
    """Single-line label placed beside a dot, on the side away from the root."""
    on_left = node.side is Side.LEFT or node.along < 0
    return WrappedLabel(
        lines=(node.label,),
        first_dy=BASELINE_DY_EM,
        anchor="end" if on_left else "start",
        dx=-DOT_LABEL_GAP if on_left else DOT_LABEL_GAP,
    )


class BoxSizer:
    """Computes label layout and box size for positioned nodes.

    The wrapped label and the box it produced are cached together, so a
    node's line count and height always come from the same measurement.

    Args:
        cache: Backend for memoized measurements; a private InMemoryCache
            when omitted
    """

    def __init__(self, cache: CacheBackend | None = None) -> None:
        self.cache: CacheBackend = cache if cache is not None else InMemoryCache()

    @staticmethod
    def cache_key(node: LayoutNode, compact: bool) -> tuple[str, str, bool]:
        return (node.id, node.label, compact)

    def wrap(self, node: LayoutNode, compact: bool) -> WrappedLabel:
        if not node.has_rectangle:
            return dot_label(node)
        return wrap_label(node.label, max_label_width(node.depth, compact, node.has_children))

    def measure(self, node: LayoutNode, compact: bool) -> tuple[WrappedLabel, Box]:
        """Label layout and box for one node, served from the cache when possible."""
        if not node.has_rectangle:
            diameter = 2 * dot_radius(node.depth, compact)
            return dot_label(node), Box(width=diameter, height=diameter)

        key = self.cache_key(node, compact)
        hit, cached = self.cache.get(key)
        if hit:
            return cached

        wrapped = self.wrap(node, compact)
        extent = text_extent(wrapped, font_size(node.depth, compact))
        padding = box_padding(node.depth, compact)
        box = Box(
            width=extent.width + padding.horizontal * 2,
            height=extent.height + padding.vertical * 2,
        )
        self.cache.set(key, (wrapped, box))
        return wrapped, box

    def size(self, node: LayoutNode, compact: bool) -> Box:
        return self.measure(node, compact)[1]

    def apply(self, nodes: list[LayoutNode], compact: bool) -> list[LayoutNode]:
        """Fill in ``label_layout`` and ``box`` on every node, in place."""
        for node in nodes:
            node.label_layout, node.box = self.measure(node, compact)
        return nodes
