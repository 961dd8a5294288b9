"""Tidy tree layout (Reingold-Tilford, linear-time variant).

Implements the Walker algorithm as corrected by Buchheim, Jünger and
Leipert ("Improving Walker's Algorithm to Run in Linear Time", 2002) with a
fixed node size: ``x`` is the cross-axis position in multiples of the
separation callback, scaled by ``cross_step``; ``y`` is ``depth * along_step``.
The root is always placed at (0, 0).
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from outlinemap.layout.separation import SeparationFn
    from outlinemap.outline.nodes import OutlineNode


@dataclass(eq=False)
class HierarchyNode:
    """Outline node wrapped for layout, with its layout-relative depth."""

    source: OutlineNode
    depth: int
    parent: HierarchyNode | None = None
    children: list[HierarchyNode] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0

    @property
    def id(self) -> str:
        return self.source.id

    def breadth_first(self) -> Iterator[HierarchyNode]:
        queue = deque([self])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(current.children)


def build_hierarchy(root: OutlineNode) -> HierarchyNode:
    """Wrap an outline tree; depths are counted from ``root``."""
    top = HierarchyNode(source=root, depth=0)
    stack = [top]
    while stack:
        current = stack.pop()
        for child in current.source.children:
            wrapped = HierarchyNode(source=child, depth=current.depth + 1, parent=current)
            current.children.append(wrapped)
            stack.append(wrapped)
    return top


class _WalkNode:
    """Per-node bookkeeping of the Walker/Buchheim passes."""

    __slots__ = ("node", "parent", "children", "A", "a", "z", "m", "c", "s", "t", "i")

    def __init__(self, node: HierarchyNode | None, i: int) -> None:
        self.node = node
        self.parent: _WalkNode | None = None
        self.children: list[_WalkNode] | None = None
        self.A: _WalkNode | None = None  # default ancestor
        self.a: _WalkNode = self  # ancestor
        self.z = 0.0  # prelim
        self.m = 0.0  # mod
        self.c = 0.0  # change
        self.s = 0.0  # shift
        self.t: _WalkNode | None = None  # thread
        self.i = i  # index among siblings


def _walk_tree(root: HierarchyNode) -> _WalkNode:
    tree = _WalkNode(root, 0)
    stack = [tree]
    while stack:
        current = stack.pop()
        kids = current.node.children
        if kids:
            current.children = [_WalkNode(kid, i) for i, kid in enumerate(kids)]
            for child in current.children:
                child.parent = current
            stack.extend(current.children)
    tree.parent = _WalkNode(None, 0)
    tree.parent.children = [tree]
    return tree


def _post_order(tree: _WalkNode) -> list[_WalkNode]:
    order: list[_WalkNode] = []
    stack = [tree]
    while stack:
        current = stack.pop()
        order.append(current)
        if current.children:
            stack.extend(current.children)
    order.reverse()
    return order


def _pre_order(tree: _WalkNode) -> Iterator[_WalkNode]:
    stack = [tree]
    while stack:
        current = stack.pop()
        yield current
        if current.children:
            stack.extend(reversed(current.children))


def _next_left(v: _WalkNode) -> _WalkNode | None:
    return v.children[0] if v.children else v.t


def _next_right(v: _WalkNode) -> _WalkNode | None:
    return v.children[-1] if v.children else v.t


def _move_subtree(wm: _WalkNode, wp: _WalkNode, shift: float) -> None:
    change = shift / (wp.i - wm.i)
    wp.c -= change
    wp.s += shift
    wm.c += change
    wp.z += shift
    wp.m += shift


def _execute_shifts(v: _WalkNode) -> None:
    shift = 0.0
    change = 0.0
    for w in reversed(v.children):
        w.z += shift
        w.m += shift
        change += w.c
        shift += w.s + change


def _next_ancestor(vim: _WalkNode, v: _WalkNode, ancestor: _WalkNode) -> _WalkNode:
    return vim.a if vim.a.parent is v.parent else ancestor


class _Walker:
    def __init__(self, separation: SeparationFn) -> None:
        self.separation = separation

    def first_walk(self, v: _WalkNode) -> None:
        siblings = v.parent.children
        w = siblings[v.i - 1] if v.i else None
        if v.children:
            _execute_shifts(v)
            midpoint = (v.children[0].z + v.children[-1].z) / 2
            if w is not None:
                v.z = w.z + self.separation(v.node, w.node)
                v.m = v.z - midpoint
            else:
                v.z = midpoint
        elif w is not None:
            v.z = w.z + self.separation(v.node, w.node)
        v.parent.A = self.apportion(v, w, v.parent.A or siblings[0])

    def apportion(self, v: _WalkNode, w: _WalkNode | None, ancestor: _WalkNode) -> _WalkNode:
        if w is None:
            return ancestor

        # i = inside, o = outside, p = right contour, m = left contour
        vip = vop = v
        vim: _WalkNode | None = w
        vom = vip.parent.children[0]
        sip = vip.m
        sop = vop.m
        sim = vim.m
        som = vom.m

        while True:
            vim = _next_right(vim)
            vip = _next_left(vip)
            if vim is None or vip is None:
                break
            vom = _next_left(vom)
            vop = _next_right(vop)
            vop.a = v
            shift = vim.z + sim - vip.z - sip + self.separation(vim.node, vip.node)
            if shift > 0:
                _move_subtree(_next_ancestor(vim, v, ancestor), v, shift)
                sip += shift
                sop += shift
            sim += vim.m
            sip += vip.m
            som += vom.m
            sop += vop.m

        if vim is not None and _next_right(vop) is None:
            vop.t = vim
            vop.m += sim - sop
        if vip is not None and _next_left(vom) is None:
            vom.t = vip
            vom.m += sip - som
            ancestor = v
        return ancestor

    @staticmethod
    def second_walk(v: _WalkNode) -> None:
        v.node.x = v.z + v.parent.m
        v.m += v.parent.m


def tidy_layout(
    root: HierarchyNode,
    separation: SeparationFn,
    cross_step: float,
    along_step: float,
) -> HierarchyNode:
    """Assign ``x`` (cross) and ``y`` (along) to every node of ``root``.

    Args:
        root: Hierarchy to lay out, modified in place
        separation: Distance between cross-adjacent nodes, in cross steps
        cross_step: Pixels per unit of separation
        along_step: Pixels per depth level

    Returns:
        ``root``, for chaining
    """
    walker = _Walker(separation)
    tree = _walk_tree(root)

    for v in _post_order(tree):
        walker.first_walk(v)
    tree.parent.m = -tree.z
    for v in _pre_order(tree):
        walker.second_walk(v)

    for node in root.breadth_first():
        node.x *= cross_step
        node.y = node.depth * along_step
    return root
