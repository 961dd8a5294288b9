"""Tests for geometry types and link connection validation."""

from outlinemap.viz.geometry import (
    LinkConnectionValidator,
    LinkGeometry,
    NodeGeometry,
    Point,
    format_issues,
)


def _validator(links, **nodes):
    return LinkConnectionValidator(nodes={k: v for k, v in nodes.items()}, links=links)


class TestPoint:
    def test_arithmetic(self):
        """Points add and subtract component-wise."""
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(5, 5) - Point(2, 3) == Point(3, 2)


class TestNodeGeometry:
    def test_edges(self):
        """Box edges sit half a width and height from the centre."""
        g = NodeGeometry("n", center_x=100, center_y=50, width=40, height=20)
        assert (g.left, g.right, g.top, g.bottom) == (80, 120, 40, 60)

    def test_entry_point_faces_source(self):
        """Links enter a box on the side facing their source."""
        g = NodeGeometry("n", center_x=100, center_y=50, width=40, height=20)
        assert g.entry_point(from_x=0) == (80, 50)
        assert g.entry_point(from_x=200) == (120, 50)

    def test_dot_entered_at_centre(self):
        """Links end at the centre of a dot."""
        g = NodeGeometry("n", center_x=100, center_y=50, width=8, height=8, has_rectangle=False)
        assert g.entry_point(from_x=0) == (100, 50)


class TestLinkConnectionValidator:
    """Link endpoints checked against node geometry."""

    def test_valid_link(self):
        """A link from centre to facing side passes."""
        v = _validator(
            [LinkGeometry("a", "b", (0, 0), (240, -28))],
            a=NodeGeometry("a", 0, 0, 80, 40),
            b=NodeGeometry("b", 260, -28, 40, 30),
        )
        assert v.validate_all() == {}

    def test_end_off_the_box_side(self):
        """An end point inside the box is reported."""
        v = _validator(
            [LinkGeometry("a", "b", (0, 0), (260, -28))],
            a=NodeGeometry("a", 0, 0, 80, 40),
            b=NodeGeometry("b", 260, -28, 40, 30),
        )
        issues = v.validate_all()
        assert list(issues) == ["a->b"]
        assert "X offset" in issues["a->b"][0]

    def test_start_off_centre(self):
        """A start point away from the parent centre is reported."""
        v = _validator(
            [LinkGeometry("a", "b", (40, 0), (240, -28))],
            a=NodeGeometry("a", 0, 0, 80, 40),
            b=NodeGeometry("b", 260, -28, 40, 30),
        )
        assert "not the centre" in v.validate_all()["a->b"][0]

    def test_missing_nodes(self):
        """Links to unknown nodes are reported by name."""
        v = _validator([LinkGeometry("a", "zzz", (0, 0), (1, 1))], a=NodeGeometry("a", 0, 0, 10, 10))
        assert v.validate_all() == {"a->zzz": ["Target node 'zzz' not found"]}

    def test_format_issues(self):
        """Issues render as an indented list per link."""
        text = format_issues({"a->b": ["first", "second"]})
        assert text == "  a->b:\n    - first\n    - second"
