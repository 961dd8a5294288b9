"""Outline text to renderable geometry.

    text -> parse -> layout -> box sizing -> links -> viewport transform

A RenderSession owns the box-size cache for one document at a time. Every
render recomputes the layout from scratch; only box sizes are memoized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from outlinemap.cache import CacheBackend, InMemoryCache
from outlinemap.exceptions import NodeNotFoundError
from outlinemap.layout.engine import LayoutResult, layout_outline
from outlinemap.layout.types import LayoutNode, LayoutOptions
from outlinemap.outline.parser import IdStrategy, parse_outline
from outlinemap.viz.geometry import LinkConnectionValidator, LinkGeometry, NodeGeometry
from outlinemap.viz.links import LinkPath, build_links
from outlinemap.viz.sizing import BoxSizer, font_size, font_weight
from outlinemap.viz.styles import (
    DEFAULT_SCHEME,
    THEME_BACKGROUND,
    ColorLookup,
    label_color,
    palette_color,
)
from outlinemap.viz.viewport import ViewportSize, ViewportTransform, compute_viewport_transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """Everything besides the text and viewport that shapes the output."""

    layout: LayoutOptions = field(default_factory=LayoutOptions)
    color_scheme: str = DEFAULT_SCHEME
    theme: str = "light"
    id_strategy: IdStrategy = IdStrategy.POSITIONAL


@dataclass(frozen=True)
class RenderedNode:
    id: str
    label: str
    lines: tuple[str, ...]
    depth: int
    cross: float
    along: float
    width: float
    height: float
    has_rectangle: bool
    side: str | None
    first_dy: float
    line_height: float
    anchor: str
    label_dx: float
    font_size: int
    font_weight: str
    color: str
    text_color: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "lines": list(self.lines),
            "depth": self.depth,
            "cross": self.cross,
            "along": self.along,
            "width": self.width,
            "height": self.height,
            "hasRectangle": self.has_rectangle,
            "side": self.side,
            "text": {
                "firstDy": self.first_dy,
                "lineHeight": self.line_height,
                "anchor": self.anchor,
                "dx": self.label_dx,
                "fontSize": self.font_size,
                "fontWeight": self.font_weight,
            },
            "color": self.color,
            "textColor": self.text_color,
        }


@dataclass(frozen=True)
class RenderedLink:
    source_id: str
    target_id: str
    path: str
    start: tuple[float, float]
    end: tuple[float, float]
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "sourceId": self.source_id,
            "targetId": self.target_id,
            "path": self.path,
            "color": self.color,
        }


@dataclass(frozen=True)
class GeometryBundle:
    """Positioned nodes, links and the fit transform, ready for a renderer."""

    nodes: tuple[RenderedNode, ...]
    links: tuple[RenderedLink, ...]
    transform: ViewportTransform
    background: str = THEME_BACKGROUND["light"]

    def node(self, node_id: str) -> RenderedNode:
        for n in self.nodes:
            if n.id == node_id:
                return n
        raise NodeNotFoundError(node_id, available=[n.id for n in self.nodes])

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [link.to_dict() for link in self.links],
            "transform": {
                "scale": self.transform.scale,
                "translateX": self.transform.translate_x,
                "translateY": self.transform.translate_y,
            },
            "background": self.background,
        }


def _render_node(node: LayoutNode, options: RenderOptions, color_lookup: ColorLookup) -> RenderedNode:
    compact = options.layout.compact
    color = color_lookup(options.color_scheme, node.depth)
    return RenderedNode(
        id=node.id,
        label=node.label,
        lines=node.label_layout.lines,
        depth=node.depth,
        cross=node.cross,
        along=node.along,
        width=node.box.width,
        height=node.box.height,
        has_rectangle=node.has_rectangle,
        side=node.side.value if node.side is not None else None,
        first_dy=node.label_layout.first_dy,
        line_height=node.label_layout.line_height,
        anchor=node.label_layout.anchor,
        label_dx=node.label_layout.dx,
        font_size=font_size(node.depth, compact),
        font_weight=font_weight(node.depth),
        color=color,
        text_color=label_color(color, node.has_rectangle, options.theme),
    )


def _render_link(path: LinkPath, source_depth: int, options: RenderOptions, color_lookup: ColorLookup) -> RenderedLink:
    return RenderedLink(
        source_id=path.source_id,
        target_id=path.target_id,
        path=path.to_svg(),
        start=(path.start.x, path.start.y),
        end=(path.end.x, path.end.y),
        color=color_lookup(options.color_scheme, source_depth),
    )


class RenderSession:
    """Renders outlines while keeping box sizes stable across re-renders.

    Args:
        cache: Store for measured labels and boxes; an InMemoryCache by default
        color_lookup: ``(scheme, depth) -> colour`` used for fills and links

    Example:
        >>> session = RenderSession()
        >>> bundle = session.render("# Topic\\n## Branch", ViewportSize(800, 600))
        >>> [n.label for n in bundle.nodes]
        ['Topic', 'Branch']
    """

    def __init__(
        self,
        cache: CacheBackend | None = None,
        *,
        color_lookup: ColorLookup = palette_color,
    ) -> None:
        self.cache: CacheBackend = cache if cache is not None else InMemoryCache()
        self.sizer = BoxSizer(self.cache)
        self.color_lookup = color_lookup
        self._document_id: str | None = None

    @property
    def document_id(self) -> str | None:
        return self._document_id

    def open_document(self, document_id: str) -> None:
        """Switch to another document, dropping sizes cached for the previous one."""
        if document_id == self._document_id:
            return
        if self._document_id is not None:
            logger.debug("Switching from document %r to %r, clearing box cache", self._document_id, document_id)
        self.cache.clear()
        self._document_id = document_id

    def layout(self, text: str, options: RenderOptions | None = None) -> LayoutResult:
        """Parse, lay out and size; no links or viewport fitting."""
        options = options or RenderOptions()
        root = parse_outline(text, id_strategy=options.id_strategy)
        result = layout_outline(root, options.layout)
        self.sizer.apply(result.nodes, options.layout.compact)
        return result

    def render(
        self,
        text: str,
        viewport: ViewportSize,
        options: RenderOptions | None = None,
        *,
        document_id: str | None = None,
    ) -> GeometryBundle:
        """Run the whole pipeline for one outline.

        Args:
            text: Outline text
            viewport: Drawing area the transform should fit
            options: Layout, colour and id options
            document_id: Identity of the document; a new value clears the box cache

        Returns:
            GeometryBundle with nodes ordered root first
        """
        options = options or RenderOptions()
        if document_id is not None:
            self.open_document(document_id)

        result = self.layout(text, options)
        depths = {node.id: node.depth for node in result.nodes}
        links = build_links(result)
        transform = compute_viewport_transform(
            result.nodes,
            viewport,
            compact=options.layout.compact,
            mode=options.layout.mode,
        )
        logger.debug(
            "Rendered %d nodes, %d links (mode=%s, compact=%s, scale=%.3f)",
            len(result.nodes),
            len(links),
            options.layout.mode.value,
            options.layout.compact,
            transform.scale,
        )
        return GeometryBundle(
            nodes=tuple(_render_node(n, options, self.color_lookup) for n in result.nodes),
            links=tuple(_render_link(p, depths[p.source_id], options, self.color_lookup) for p in links),
            transform=transform,
            background=THEME_BACKGROUND.get(options.theme, THEME_BACKGROUND["light"]),
        )


def render_outline(
    text: str,
    viewport: ViewportSize,
    options: RenderOptions | None = None,
) -> GeometryBundle:
    """Render with a throwaway session."""
    return RenderSession().render(text, viewport, options)


def validate_links(bundle: GeometryBundle) -> dict[str, list[str]]:
    """Check every link endpoint against the node it connects to."""
    validator = LinkConnectionValidator(
        nodes={
            n.id: NodeGeometry(n.id, n.along, n.cross, n.width, n.height, n.has_rectangle)
            for n in bundle.nodes
        },
        links=[LinkGeometry(link.source_id, link.target_id, link.start, link.end) for link in bundle.links],
    )
    return validator.validate_all()
