"""Tests for colour schemes."""

import pytest

from outlinemap.viz.styles import COLOR_SCHEMES, THEME_TEXT, label_color, palette_color


class TestPaletteColor:
    def test_cycles_by_depth(self):
        """Colours repeat once the palette runs out."""
        palette = COLOR_SCHEMES["default"]
        assert [palette_color("default", d) for d in range(len(palette) + 1)] == [*palette, palette[0]]

    def test_named_scheme(self):
        """Named schemes use their own palette."""
        assert palette_color("vibrant", 1) == "#FFD166"

    def test_unknown_scheme_falls_back(self):
        """Unknown schemes use the default palette."""
        assert palette_color("neon", 2) == palette_color("default", 2)

    @pytest.mark.parametrize("scheme", sorted(COLOR_SCHEMES))
    def test_adjacent_depths_differ(self, scheme):
        """A parent and child never share a colour."""
        colors = [palette_color(scheme, d) for d in range(8)]
        assert all(a != b for a, b in zip(colors, colors[1:]))


class TestLabelColor:
    def test_dark_text_on_light_fill(self):
        """Light fills get black text."""
        assert label_color("#E9C46A", has_rectangle=True) == "#000000"

    def test_white_text_on_dark_fill(self):
        """Dark fills get white text."""
        assert label_color("#2A9D8F", has_rectangle=True) == "#ffffff"

    def test_case_insensitive(self):
        """Fill colours match regardless of case."""
        assert label_color("#e9c46a", has_rectangle=True) == "#000000"

    def test_dot_labels_follow_theme(self):
        """Dot labels use the theme text colour."""
        assert label_color("#2A9D8F", has_rectangle=False, theme="dark") == THEME_TEXT["dark"]
        assert label_color("#2A9D8F", has_rectangle=False) == THEME_TEXT["light"]
