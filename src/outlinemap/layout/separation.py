"""Sibling separation between cross-adjacent nodes.

Values are multiples of the cross step. Siblings sharing a parent sit
closer than cousins, and every value grows in compact mode. Levels two and
three are widened when a node carries children past the shape cutoff,
since those children need room for their own boxes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from outlinemap.layout.shape import ShapePolicy
    from outlinemap.layout.tidy import HierarchyNode

SeparationFn = Callable[["HierarchyNode", "HierarchyNode"], float]


@dataclass(frozen=True)
class Spacing:
    same_parent: float
    other_parent: float
    compact_same_parent: float
    compact_other_parent: float

    def pick(self, same_parent: bool, compact: bool) -> float:
        if compact:
            return self.compact_same_parent if same_parent else self.compact_other_parent
        return self.same_parent if same_parent else self.other_parent


DEPTH2_DEEP = Spacing(2.6, 2.9, 3.2, 3.4)
DEPTH2 = Spacing(1.9, 2.2, 2.4, 2.7)
DEPTH3_DEEP = Spacing(2.4, 2.7, 2.9, 3.2)
DEPTH3 = Spacing(1.7, 2.0, 2.2, 2.4)
BEYOND_CUTOFF = Spacing(1.4, 1.6, 1.9, 2.1)
DEFAULT = Spacing(1.6, 1.9, 2.2, 2.4)


def spacing_band(a_depth: int, b_depth: int, deep: bool, cutoff_depth: int) -> Spacing:
    """Pick the spacing row for a pair of nodes."""
    if a_depth == 2 or b_depth == 2:
        return DEPTH2_DEEP if deep else DEPTH2
    if a_depth == 3 or b_depth == 3:
        return DEPTH3_DEEP if deep else DEPTH3
    if a_depth > cutoff_depth or b_depth > cutoff_depth:
        return BEYOND_CUTOFF
    return DEFAULT


def make_separation(policy: ShapePolicy, compact: bool) -> SeparationFn:
    """Build the separation callback used by the tidy tree layout."""

    def separation(a: HierarchyNode, b: HierarchyNode) -> float:
        deep = policy.has_deep_children(a.id) or policy.has_deep_children(b.id)
        band = spacing_band(a.depth, b.depth, deep, policy.cutoff_depth)
        return band.pick(a.parent is b.parent, compact)

    return separation
