"""Fit-and-centre transform for the whole diagram."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from outlinemap.layout.types import LayoutMode, LayoutNode
from outlinemap.viz.geometry import Point

# Per-node margin around the node centre when measuring the diagram
BOX_BUFFER = 150
COMPACT_BOX_BUFFER = 180
DOT_BUFFER = 50
COMPACT_DOT_BUFFER = 70

FILL_RATIO = 0.8
COMPACT_RIGHT_FILL_RATIO = 0.55
COMPACT_BIDIRECTIONAL_FILL_RATIO = 0.5

MAX_SCALE = 1.0
COMPACT_MAX_SCALE = 0.7

# Compact right layouts pin the root at this fraction of the viewport width
COMPACT_ROOT_ANCHOR = 0.3


@dataclass(frozen=True)
class ViewportSize:
    """Drawing area in pixels."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must have positive size, got {self.width}x{self.height}")


@dataclass(frozen=True)
class ViewportTransform:
    """Uniform scale followed by a translation, applied to diagram coordinates."""

    scale: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    @classmethod
    def identity(cls) -> ViewportTransform:
        return cls()

    def apply(self, point: Point) -> Point:
        """Map a diagram-space point to viewport pixels."""
        return Point(point.x * self.scale + self.translate_x, point.y * self.scale + self.translate_y)

    def to_svg(self) -> str:
        return f"translate({self.translate_x:.2f},{self.translate_y:.2f}) scale({self.scale:.4f})"


@dataclass(frozen=True)
class Bounds:
    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point:
        return Point((self.left + self.right) / 2, (self.top + self.bottom) / 2)


def node_buffer(node: LayoutNode, compact: bool) -> float:
    if node.has_rectangle:
        return COMPACT_BOX_BUFFER if compact else BOX_BUFFER
    return COMPACT_DOT_BUFFER if compact else DOT_BUFFER


def diagram_bounds(nodes: Iterable[LayoutNode], compact: bool) -> Bounds | None:
    """Bounding box of all node centres, each padded by its buffer."""
    left = top = float("inf")
    right = bottom = float("-inf")
    for node in nodes:
        buffer = node_buffer(node, compact)
        left = min(left, node.along - buffer)
        right = max(right, node.along + buffer)
        top = min(top, node.cross - buffer)
        bottom = max(bottom, node.cross + buffer)
    if left == float("inf"):
        return None
    return Bounds(left=left, right=right, top=top, bottom=bottom)


def fill_ratio(compact: bool, mode: LayoutMode) -> float:
    if not compact:
        return FILL_RATIO
    if mode is LayoutMode.RIGHT:
        return COMPACT_RIGHT_FILL_RATIO
    return COMPACT_BIDIRECTIONAL_FILL_RATIO


def compute_viewport_transform(
    nodes: list[LayoutNode],
    viewport: ViewportSize,
    *,
    compact: bool = False,
    mode: LayoutMode = LayoutMode.BIDIRECTIONAL,
) -> ViewportTransform:
    """Scale and translation that fit the diagram into the viewport.

    The diagram is centred, except for compact right layouts, where the
    root is pinned near the left third because content only grows rightward.

    Args:
        nodes: Positioned nodes (root first)
        viewport: Target drawing area
        compact: Small-screen mode
        mode: Layout mode the nodes were produced with

    Returns:
        ViewportTransform; identity when there are no nodes
    """
    bounds = diagram_bounds(nodes, compact)
    if bounds is None:
        return ViewportTransform.identity()

    ratio = fill_ratio(compact, mode)
    scale = min(
        ratio * viewport.width / bounds.width,
        ratio * viewport.height / bounds.height,
        COMPACT_MAX_SCALE if compact else MAX_SCALE,
    )

    center = bounds.center
    translate_x = viewport.width / 2 - center.x * scale
    translate_y = viewport.height / 2 - center.y * scale

    if compact and mode is LayoutMode.RIGHT:
        root = next((n for n in nodes if n.is_root), None)
        if root is not None:
            translate_x = viewport.width * COMPACT_ROOT_ANCHOR - root.along * scale

    return ViewportTransform(scale=scale, translate_x=translate_x, translate_y=translate_y)
