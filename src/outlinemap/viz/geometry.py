"""Geometry value types and link connection validation.

Screen space puts the along axis on x and the cross axis on y, so a
right-growing tree reads left to right.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Immutable 2D point.

    Example:
        >>> Point(1, 2) + Point(3, 4)
        Point(x=4, y=6)
    """

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Box:
    """Width and height of a node's drawn shape."""

    width: float
    height: float


@dataclass(frozen=True)
class NodeGeometry:
    """Node bounding box in screen space, centred on (center_x, center_y)."""

    id: str
    center_x: float
    center_y: float
    width: float
    height: float
    has_rectangle: bool = True

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def left(self) -> float:
        return self.center_x - self.width / 2

    @property
    def right(self) -> float:
        return self.center_x + self.width / 2

    @property
    def top(self) -> float:
        return self.center_y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.center_y + self.height / 2

    def entry_point(self, from_x: float) -> tuple[float, float]:
        """Where an incoming link coming from ``from_x`` should end.

        Boxes are entered at the middle of the side facing the source,
        dots at their centre.
        """
        if not self.has_rectangle:
            return self.center
        if from_x > self.center_x:
            return (self.right, self.center_y)
        return (self.left, self.center_y)


@dataclass(frozen=True)
class LinkGeometry:
    """Endpoints of a rendered link."""

    source_id: str
    target_id: str
    start_point: tuple[float, float]
    end_point: tuple[float, float]


@dataclass
class LinkConnectionValidator:
    """Validates link endpoints against node geometry.

    Checks that:
    1. A link starts at the centre of its parent
    2. A link ends on the facing side of a boxed child, or at a dot's centre
    3. The child lies on the side of the parent the link travels to
    """

    nodes: dict[str, NodeGeometry]
    links: list[LinkGeometry]
    tolerance: float = 0.01

    def validate_link(self, link: LinkGeometry) -> list[str]:
        """Returns list of issues (empty = valid)."""
        issues = []

        src = self.nodes.get(link.source_id)
        tgt = self.nodes.get(link.target_id)

        if not src:
            issues.append(f"Source node '{link.source_id}' not found")
            return issues
        if not tgt:
            issues.append(f"Target node '{link.target_id}' not found")
            return issues

        dx_start = abs(link.start_point[0] - src.center_x)
        dy_start = abs(link.start_point[1] - src.center_y)
        if dx_start > self.tolerance or dy_start > self.tolerance:
            issues.append(
                f"Link start ({link.start_point[0]:.1f}, {link.start_point[1]:.1f}) "
                f"is not the centre of '{src.id}'"
            )

        expected_end = tgt.entry_point(src.center_x)
        dx_end = abs(link.end_point[0] - expected_end[0])
        dy_end = abs(link.end_point[1] - expected_end[1])
        if dx_end > self.tolerance:
            issues.append(f"Link end X offset: {dx_end:.1f}px from entry of '{tgt.id}'")
        if dy_end > self.tolerance:
            issues.append(f"Link end Y offset: {dy_end:.1f}px from entry of '{tgt.id}'")

        if src.center_x != tgt.center_x:
            travels_right = link.end_point[0] > link.start_point[0]
            child_right = tgt.center_x > src.center_x
            if travels_right != child_right:
                issues.append(f"Link to '{tgt.id}' points away from the child")

        return issues

    def validate_all(self) -> dict[str, list[str]]:
        """Returns {link_id: [issues]} for all links with issues."""
        return {
            f"{link.source_id}->{link.target_id}": issues
            for link in self.links
            if (issues := self.validate_link(link))
        }


def format_issues(issues: dict[str, list[str]]) -> str:
    """Format validation issues for display."""
    lines = []
    for link_id, link_issues in issues.items():
        lines.append(f"  {link_id}:")
        for issue in link_issues:
            lines.append(f"    - {issue}")
    return "\n".join(lines)
