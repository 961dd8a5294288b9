"""Colour schemes for nodes and links.

Colours are picked per depth, cycling through the scheme's palette. Box
labels get a dark or light text colour depending on the box fill; labels
beside dots follow the page theme.
"""

from __future__ import annotations

from collections.abc import Callable

ColorLookup = Callable[[str, int], str]

DEFAULT_SCHEME = "default"

COLOR_SCHEMES: dict[str, tuple[str, ...]] = {
    "default": ("#2A9D8F", "#E9C46A", "#F4A261", "#E76F51"),
    "vibrant": ("#EF476F", "#FFD166", "#118AB2", "#06D6A0"),
    "summer": ("#70D6FF", "#FF70A6", "#FFD670", "#E9FF70"),
    "monochrome": ("#00A6FB", "#0582CA", "#006494", "#003554", "#051923"),
}

# Fills that need dark text; every other fill gets white text
_DARK_TEXT_ON: dict[str, str] = {
    "#E9C46A": "#000000",
    "#F4A261": "#000000",
    "#FFD166": "#000000",
    "#70D6FF": "#000000",
    "#FF70A6": "#000000",
    "#FFD670": "#333333",
    "#E9FF70": "#333333",
}

THEME_TEXT: dict[str, str] = {
    "light": "#000000",
    "dark": "#ffffff",
}

THEME_BACKGROUND: dict[str, str] = {
    "light": "#ffffff",
    "dark": "#1a1a1a",
}


def palette_color(scheme: str, depth: int) -> str:
    """Fill colour for a node at ``depth``. Unknown schemes fall back to the default.

    Example:
        >>> palette_color("vibrant", 1)
        '#FFD166'
    """
    palette = COLOR_SCHEMES.get(scheme, COLOR_SCHEMES[DEFAULT_SCHEME])
    return palette[depth % len(palette)]


def label_color(background: str, has_rectangle: bool, theme: str = "light") -> str:
    """Text colour that stays readable on ``background``."""
    if not has_rectangle:
        return THEME_TEXT.get(theme, THEME_TEXT["light"])
    return _DARK_TEXT_ON.get(background.upper(), "#ffffff")
