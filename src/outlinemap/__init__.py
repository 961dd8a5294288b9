"""Outlinemap - turn indented outlines into mind-map geometry."""

from outlinemap.cache import CacheBackend, InMemoryCache
from outlinemap.config import OutlineMapConfig, load_config
from outlinemap.exceptions import GenerationError, NodeNotFoundError
from outlinemap.layout import (
    LayoutMode,
    LayoutNode,
    LayoutOptions,
    LayoutResult,
    Side,
    layout_outline,
)
from outlinemap.outline import (
    IdStrategy,
    NodeIndexEntry,
    OutlineNode,
    build_node_index,
    index_outline,
    parse_outline,
    update_node_label,
)
from outlinemap.pipeline import (
    GeometryBundle,
    RenderedLink,
    RenderedNode,
    RenderOptions,
    RenderSession,
    render_outline,
    validate_links,
)
from outlinemap.sources import (
    DEFAULT_OUTLINE,
    OutlineGenerator,
    TemplateOutlineGenerator,
    generate_outline,
)
from outlinemap.viz import (
    BoxSizer,
    LinkPath,
    ViewportSize,
    ViewportTransform,
    WrappedLabel,
    build_links,
    compute_viewport_transform,
    palette_color,
    wrap_label,
)

__all__ = [
    # Outline text
    "OutlineNode",
    "NodeIndexEntry",
    "IdStrategy",
    "parse_outline",
    "build_node_index",
    "index_outline",
    "update_node_label",
    # Layout
    "LayoutMode",
    "LayoutNode",
    "LayoutOptions",
    "LayoutResult",
    "Side",
    "layout_outline",
    # Geometry
    "BoxSizer",
    "LinkPath",
    "ViewportSize",
    "ViewportTransform",
    "WrappedLabel",
    "build_links",
    "compute_viewport_transform",
    "palette_color",
    "wrap_label",
    # Pipeline
    "GeometryBundle",
    "RenderedLink",
    "RenderedNode",
    "RenderOptions",
    "RenderSession",
    "render_outline",
    "validate_links",
    # Sources
    "DEFAULT_OUTLINE",
    "OutlineGenerator",
    "TemplateOutlineGenerator",
    "generate_outline",
    # Cache
    "CacheBackend",
    "InMemoryCache",
    # Config
    "OutlineMapConfig",
    "load_config",
    # Exceptions
    "GenerationError",
    "NodeNotFoundError",
]
