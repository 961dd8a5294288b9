"""Project-level configuration from pyproject.toml.

Reads the [tool.outlinemap] section to provide default render settings
for the CLI.

    [tool.outlinemap]
    layout = "right"
    compact = false
    color_scheme = "vibrant"
    viewport_width = 1600
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from outlinemap.layout.types import LayoutMode, LayoutOptions
from outlinemap.outline.parser import IdStrategy
from outlinemap.pipeline import RenderOptions
from outlinemap.viz.viewport import ViewportSize


@dataclass(frozen=True)
class OutlineMapConfig:
    """Configuration from [tool.outlinemap] in pyproject.toml."""

    layout: str | None = None
    compact: bool = False
    color_scheme: str = "default"
    theme: str = "light"
    viewport_width: int = 1280
    viewport_height: int = 800
    id_strategy: str = "positional"

    def render_options(
        self,
        *,
        layout: str | None = None,
        compact: bool | None = None,
        color_scheme: str | None = None,
        theme: str | None = None,
    ) -> RenderOptions:
        """Build RenderOptions, letting explicit arguments override the config.

        With no layout given anywhere, the mode follows the screen size:
        bidirectional normally, right-only when compact.

        Raises:
            ValueError: Unknown layout mode or id strategy
        """
        compact = self.compact if compact is None else compact
        mode = layout or self.layout
        if mode is None:
            layout_options = LayoutOptions.for_screen(compact)
        else:
            layout_options = LayoutOptions(mode=LayoutMode.parse(mode), compact=compact)
        return RenderOptions(
            layout=layout_options,
            color_scheme=color_scheme or self.color_scheme,
            theme=theme or self.theme,
            id_strategy=IdStrategy.parse(self.id_strategy),
        )

    def viewport(self, width: int | None = None, height: int | None = None) -> ViewportSize:
        return ViewportSize(
            self.viewport_width if width is None else width,
            self.viewport_height if height is None else height,
        )


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> OutlineMapConfig:
    """Load [tool.outlinemap] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.outlinemap] section.
    """
    path = find_pyproject(start)
    if path is None:
        return OutlineMapConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        import tomli as tomllib

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("outlinemap", {})
    if not section:
        return OutlineMapConfig()

    defaults = OutlineMapConfig()
    return OutlineMapConfig(
        layout=section.get("layout", defaults.layout),
        compact=bool(section.get("compact", defaults.compact)),
        color_scheme=section.get("color_scheme", defaults.color_scheme),
        theme=section.get("theme", defaults.theme),
        viewport_width=int(section.get("viewport_width", defaults.viewport_width)),
        viewport_height=int(section.get("viewport_height", defaults.viewport_height)),
        id_strategy=section.get("id_strategy", defaults.id_strategy),
    )
