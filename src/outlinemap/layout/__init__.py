"""Tree layout: positions, sibling separation and shape policy."""

from outlinemap.layout.engine import LayoutResult, layout_outline
from outlinemap.layout.separation import make_separation, spacing_band
from outlinemap.layout.shape import SHAPE_CUTOFF_DEPTH, ShapePolicy
from outlinemap.layout.strategies import (
    STRATEGIES,
    BidirectionalLayout,
    RightLayout,
    get_strategy,
    split_children,
)
from outlinemap.layout.tidy import HierarchyNode, build_hierarchy, tidy_layout
from outlinemap.layout.types import LayoutMode, LayoutNode, LayoutOptions, Side

__all__ = [
    "BidirectionalLayout",
    "HierarchyNode",
    "LayoutMode",
    "LayoutNode",
    "LayoutOptions",
    "LayoutResult",
    "RightLayout",
    "SHAPE_CUTOFF_DEPTH",
    "STRATEGIES",
    "ShapePolicy",
    "Side",
    "build_hierarchy",
    "get_strategy",
    "layout_outline",
    "make_separation",
    "spacing_band",
    "split_children",
    "tidy_layout",
]
