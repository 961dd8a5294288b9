"""Layout options and positioned node types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from outlinemap.viz.geometry import Box
    from outlinemap.viz.text import WrappedLabel

# Distance between depth levels along the main axis
ALONG_STEP = 260
COMPACT_ALONG_STEP = 280

# Unit of sibling spacing; separation values are multiples of this
CROSS_STEP = 35
COMPACT_CROSS_STEP = 50


class LayoutMode(Enum):
    """Supported diagram layouts."""

    RIGHT = "right"
    BIDIRECTIONAL = "bidirectional"

    @classmethod
    def parse(cls, value: str | LayoutMode) -> LayoutMode:
        """Parse a mode name. ``"bi"`` is accepted for BIDIRECTIONAL.

        Raises:
            ValueError: Unknown mode name
        """
        if isinstance(value, LayoutMode):
            return value
        name = value.strip().lower()
        if name == "bi":
            return cls.BIDIRECTIONAL
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown layout mode '{value}'. Choose one of: {choices}") from None


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class LayoutOptions:
    """Inputs that change the layout besides the tree itself.

    Attributes:
        mode: Right-only or bidirectional layout
        compact: Small-screen variant with larger spacing and fonts
    """

    mode: LayoutMode = LayoutMode.BIDIRECTIONAL
    compact: bool = False

    @classmethod
    def for_screen(cls, compact: bool) -> LayoutOptions:
        """Default options for a screen: compact screens lay out to the right only."""
        return cls(mode=LayoutMode.RIGHT if compact else LayoutMode.BIDIRECTIONAL, compact=compact)

    @property
    def along_step(self) -> int:
        return COMPACT_ALONG_STEP if self.compact else ALONG_STEP

    @property
    def cross_step(self) -> int:
        return COMPACT_CROSS_STEP if self.compact else CROSS_STEP


@dataclass
class LayoutNode:
    """A positioned outline node.

    ``along`` grows with depth (negative on the left branch of a
    bidirectional layout); ``cross`` spreads siblings. ``box`` and
    ``label_layout`` stay None until box sizing runs.
    """

    id: str
    label: str
    depth: int
    parent_id: str | None
    cross: float
    along: float
    side: Side | None
    has_rectangle: bool
    has_children: bool
    box: Box | None = None
    label_layout: WrappedLabel | None = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
