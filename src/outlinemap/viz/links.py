"""Curved connectors between parents and children.

Each link is a cubic curve whose two control points share an x position a
fixed fraction of the way along the link, giving long flat ends and a
smooth bend near the child.
"""

from __future__ import annotations

from dataclasses import dataclass

from outlinemap.layout.engine import LayoutResult
from outlinemap.layout.types import LayoutNode
from outlinemap.viz.geometry import Point

BOX_BEND = 0.8
DOT_BEND = 0.75


def _fmt(value: float) -> str:
    return f"{value:.2f}"


@dataclass(frozen=True)
class LinkPath:
    """Cubic curve from a parent anchor to a child in screen space."""

    source_id: str
    target_id: str
    start: Point
    control1: Point
    control2: Point
    end: Point

    def to_svg(self) -> str:
        """SVG path data, e.g. ``M0.00,0.00 C195.00,0.00 195.00,-28.00 260.00,-28.00``."""
        points = (self.control1, self.control2, self.end)
        curve = " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in points)
        return f"M{_fmt(self.start.x)},{_fmt(self.start.y)} C{curve}"


def link_endpoint(parent: LayoutNode, child: LayoutNode) -> Point:
    """Where the link meets the child: the facing side of a box, or a dot's centre."""
    along = child.along
    if child.has_rectangle and child.box is not None:
        half_width = child.box.width / 2
        along = along + half_width if along < parent.along else along - half_width
    return Point(along, child.cross)


def build_link_path(parent: LayoutNode, child: LayoutNode) -> LinkPath:
    start = Point(parent.along, parent.cross)
    end = link_endpoint(parent, child)
    bend = BOX_BEND if child.has_rectangle else DOT_BEND
    mid = start.x + (end.x - start.x) * bend
    return LinkPath(
        source_id=parent.id,
        target_id=child.id,
        start=start,
        control1=Point(mid, start.y),
        control2=Point(mid, end.y),
        end=end,
    )


def build_links(result: LayoutResult) -> list[LinkPath]:
    """One link per tree edge, ordered like the child nodes."""
    nodes = result.by_id()
    return [build_link_path(nodes[source], nodes[target]) for source, target in result.edges()]
