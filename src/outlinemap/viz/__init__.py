"""Node sizing, link geometry, viewport fitting and colours."""

from outlinemap.viz.geometry import (
    Box,
    LinkConnectionValidator,
    LinkGeometry,
    NodeGeometry,
    Point,
    format_issues,
)
from outlinemap.viz.links import LinkPath, build_link_path, build_links
from outlinemap.viz.sizing import BoxSizer, max_label_width
from outlinemap.viz.styles import COLOR_SCHEMES, ColorLookup, label_color, palette_color
from outlinemap.viz.text import WrappedLabel, wrap_label
from outlinemap.viz.viewport import ViewportSize, ViewportTransform, compute_viewport_transform

__all__ = [
    "Box",
    "BoxSizer",
    "COLOR_SCHEMES",
    "ColorLookup",
    "LinkConnectionValidator",
    "LinkGeometry",
    "LinkPath",
    "NodeGeometry",
    "Point",
    "ViewportSize",
    "ViewportTransform",
    "WrappedLabel",
    "build_link_path",
    "build_links",
    "compute_viewport_transform",
    "format_issues",
    "label_color",
    "max_label_width",
    "palette_color",
    "wrap_label",
]
