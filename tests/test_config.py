"""Tests for [tool.outlinemap] configuration."""

import textwrap

import pytest

from outlinemap.config import OutlineMapConfig, find_pyproject, load_config
from outlinemap.layout.types import LayoutMode
from outlinemap.outline.parser import IdStrategy


class TestFindPyproject:
    def test_exists(self, tmp_path):
        """A pyproject.toml in the start directory is found."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")
        assert find_pyproject(tmp_path) == pyproject

    def test_walks_up(self, tmp_path):
        """Lookup climbs parent directories until it finds one."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")
        child = tmp_path / "docs" / "maps"
        child.mkdir(parents=True)
        assert find_pyproject(child) == pyproject


class TestLoadConfig:
    def test_section_values(self, tmp_path):
        """Every key of the section lands on the config."""
        (tmp_path / "pyproject.toml").write_text(
            textwrap.dedent("""\
            [project]
            name = "test"

            [tool.outlinemap]
            layout = "right"
            compact = true
            color_scheme = "vibrant"
            viewport_width = 1600
            id_strategy = "content_path"
            """)
        )
        config = load_config(tmp_path)
        assert config == OutlineMapConfig(
            layout="right",
            compact=True,
            color_scheme="vibrant",
            viewport_width=1600,
            id_strategy="content_path",
        )

    def test_missing_section_gives_defaults(self, tmp_path):
        """A pyproject without the section yields the defaults."""
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'test'\n")
        assert load_config(tmp_path) == OutlineMapConfig()


class TestOutlineMapConfig:
    """Turning config into render options."""

    def test_defaults(self):
        """Default config renders bidirectionally on a regular screen."""
        options = OutlineMapConfig().render_options()
        assert options.layout.mode is LayoutMode.BIDIRECTIONAL
        assert options.layout.compact is False
        assert options.color_scheme == "default"
        assert options.id_strategy is IdStrategy.POSITIONAL

    def test_compact_without_layout_lays_out_right(self):
        """Compact screens default to the right-only layout."""
        assert OutlineMapConfig(compact=True).render_options().layout.mode is LayoutMode.RIGHT
        assert OutlineMapConfig().render_options(compact=True).layout.mode is LayoutMode.RIGHT

    def test_configured_layout_wins_over_screen_default(self):
        """An explicit layout in the config is kept on compact screens."""
        options = OutlineMapConfig(layout="bidirectional", compact=True).render_options()
        assert options.layout.mode is LayoutMode.BIDIRECTIONAL
        assert options.layout.compact is True

    def test_arguments_override(self):
        """Explicit arguments beat configured values."""
        config = OutlineMapConfig(layout="right", compact=True, color_scheme="summer")
        options = config.render_options(layout="bi", compact=False, color_scheme="monochrome", theme="dark")
        assert options.layout.mode is LayoutMode.BIDIRECTIONAL
        assert options.layout.compact is False
        assert options.color_scheme == "monochrome"
        assert options.theme == "dark"

    def test_unknown_layout(self):
        """An unknown layout name is rejected."""
        with pytest.raises(ValueError):
            OutlineMapConfig(layout="radial").render_options()

    def test_viewport(self):
        """Viewport size comes from config unless overridden."""
        config = OutlineMapConfig(viewport_width=1000, viewport_height=500)
        assert (config.viewport().width, config.viewport().height) == (1000, 500)
        assert config.viewport(width=300).width == 300
