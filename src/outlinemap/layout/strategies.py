"""Layout strategies, one per LayoutMode.

Each strategy turns an outline tree into positioned LayoutNodes, ordered
root first and breadth-first after that.
"""

from __future__ import annotations

import math
from typing import Protocol

from outlinemap.layout.separation import make_separation
from outlinemap.layout.shape import ShapePolicy
from outlinemap.layout.tidy import HierarchyNode, build_hierarchy, tidy_layout
from outlinemap.layout.types import LayoutMode, LayoutNode, LayoutOptions, Side
from outlinemap.outline.nodes import OutlineNode


class LayoutStrategy(Protocol):
    mode: LayoutMode

    def arrange(
        self,
        root: OutlineNode,
        options: LayoutOptions,
        policy: ShapePolicy,
    ) -> list[LayoutNode]: ...


def _tidy(root: OutlineNode, options: LayoutOptions, policy: ShapePolicy) -> HierarchyNode:
    return tidy_layout(
        build_hierarchy(root),
        separation=make_separation(policy, options.compact),
        cross_step=options.cross_step,
        along_step=options.along_step,
    )


def _to_layout_node(
    node: HierarchyNode,
    policy: ShapePolicy,
    side: Side | None,
    *,
    mirror: bool = False,
) -> LayoutNode:
    along = -node.y if mirror else node.y
    return LayoutNode(
        id=node.id,
        label=node.source.label,
        depth=node.depth,
        parent_id=node.parent.id if node.parent is not None else None,
        cross=node.x,
        along=along,
        side=side,
        has_rectangle=policy.has_rectangle(node.id),
        has_children=bool(node.source.children),
    )


class RightLayout:
    """Whole tree grows to the right of the root."""

    mode = LayoutMode.RIGHT

    def arrange(
        self,
        root: OutlineNode,
        options: LayoutOptions,
        policy: ShapePolicy,
    ) -> list[LayoutNode]:
        hierarchy = _tidy(root, options, policy)
        return [
            _to_layout_node(node, policy, None if node.parent is None else Side.RIGHT)
            for node in hierarchy.breadth_first()
        ]


class BidirectionalLayout:
    """Root children split into a mirrored left branch and a right branch.

    The first ``ceil(n / 2)`` children go left. Both branches are laid out
    independently from a copy of the root; the left one is then mirrored
    by negating its along-axis coordinates.
    """

    mode = LayoutMode.BIDIRECTIONAL

    def arrange(
        self,
        root: OutlineNode,
        options: LayoutOptions,
        policy: ShapePolicy,
    ) -> list[LayoutNode]:
        left_children, right_children = split_children(root)
        nodes = [_to_layout_node(HierarchyNode(source=root, depth=0), policy, None)]

        for children, side in ((left_children, Side.LEFT), (right_children, Side.RIGHT)):
            if not children:
                continue
            branch = _tidy(root.with_children(children), options, policy)
            nodes.extend(
                _to_layout_node(node, policy, side, mirror=side is Side.LEFT)
                for node in branch.breadth_first()
                if node.parent is not None
            )
        return nodes


def split_children(root: OutlineNode) -> tuple[list[OutlineNode], list[OutlineNode]]:
    """Split root children into (left, right) branches, left taking the extra one."""
    midpoint = math.ceil(len(root.children) / 2)
    return root.children[:midpoint], root.children[midpoint:]


STRATEGIES: dict[LayoutMode, LayoutStrategy] = {
    LayoutMode.RIGHT: RightLayout(),
    LayoutMode.BIDIRECTIONAL: BidirectionalLayout(),
}


def get_strategy(mode: LayoutMode | str) -> LayoutStrategy:
    return STRATEGIES[LayoutMode.parse(mode)]
