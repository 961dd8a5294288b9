"""Tests for outline parsing."""

import logging

import pytest

from outlinemap.outline.nodes import EMPTY_LABEL, EMPTY_NODE_ID
from outlinemap.outline.parser import (
    IdStrategy,
    LineSyntax,
    classify_line,
    parse_outline,
    sanitize_label,
)


def _shape(node):
    """(label, depth, [children]) tuple for compact assertions."""
    return (node.label, node.depth, [_shape(c) for c in node.children])


class TestClassifyLine:
    """Tests for single-line classification."""

    def test_heading_level_from_marks(self):
        """Heading level is the number of marks minus one."""
        parsed = classify_line("### Third")
        assert parsed.syntax is LineSyntax.HEADING
        assert parsed.level == 2
        assert parsed.label == "Third"
        assert parsed.prefix == "### "

    def test_bullet_level_from_indent(self):
        """Bullet level is indentation over two, plus one."""
        parsed = classify_line("    - Item")
        assert parsed.syntax is LineSyntax.BULLET
        assert parsed.level == 3
        assert parsed.prefix == "    - "

    def test_unindented_bullet_is_level_one(self):
        """A bullet at the margin sits just under the root."""
        assert classify_line("- Item").level == 1

    def test_odd_indent_rounds_down(self):
        """Odd indentation rounds down to the shallower level."""
        assert classify_line("   - Item").level == 2

    def test_tab_counts_as_two_spaces(self):
        """A tab indents one level."""
        assert classify_line("\t- Item").level == 2

    def test_bullet_heading_uses_marks_not_indent(self):
        """Bullet headings take their level from the marks."""
        parsed = classify_line("      - ## Build")
        assert parsed.syntax is LineSyntax.BULLET_HEADING
        assert parsed.level == 1
        assert parsed.label == "Build"
        assert parsed.prefix == "      - ## "

    def test_plain_text_is_level_zero(self):
        """Plain lines are root candidates."""
        parsed = classify_line("  Just words")
        assert parsed.syntax is LineSyntax.PLAIN
        assert parsed.level == 0
        assert parsed.label == "Just words"

    def test_prefix_keeps_original_whitespace(self):
        """The prefix is kept exactly as written."""
        assert classify_line("##   Spaced").prefix == "##   "
        assert classify_line("  -   Item").prefix == "  -   "


class TestSanitizeLabel:
    """Tests for inline markup removal."""

    def test_bold_and_underscore_emphasis(self):
        """Both emphasis forms are unwrapped."""
        assert sanitize_label("**Bold** and __strong__") == "Bold and strong"

    def test_link_keeps_text(self):
        """Links collapse to their text."""
        assert sanitize_label("See [the docs](https://example.com)") == "See the docs"

    def test_inline_code(self):
        """Backticks are dropped."""
        assert sanitize_label("Run `make`") == "Run make"

    def test_strips_surrounding_whitespace(self):
        """Labels are trimmed."""
        assert sanitize_label("   padded  ") == "padded"

    def test_plain_label_unchanged(self):
        """Labels without markup pass through."""
        assert sanitize_label("Nothing to do") == "Nothing to do"


class TestParseOutline:
    """Tests for building the tree from text."""

    def test_headings(self):
        """Heading levels nest into a tree."""
        root = parse_outline("# A\n## B\n### C\n## D")
        assert _shape(root) == ("A", 0, [("B", 1, [("C", 2, [])]), ("D", 1, [])])

    def test_positional_ids_use_line_index(self, mixed_outline):
        """Positional ids name the source line."""
        root = parse_outline(mixed_outline)
        ids = [n.id for n in root.walk()]
        assert ids == [
            "node-0",
            "node-2",
            "node-3",
            "node-4",
            "node-5",
            "node-7",
            "node-8",
            "node-9",
            "node-11",
        ]

    def test_mixed_syntaxes(self, mixed_outline):
        """Headings, bullets and bullet headings nest together."""
        root = parse_outline(mixed_outline)
        assert _shape(root) == (
            "Project Plan",
            0,
            [
                ("Research", 1, [("Market analysis", 2, [("Competitors", 3, [])]), ("User interviews", 2, [])]),
                ("Build", 1, [("Backend", 2, []), ("Frontend", 2, [])]),
                ("Launch", 1, []),
            ],
        )

    def test_line_index_skips_blank_lines_but_counts_them(self):
        """Blank lines make no nodes but still count."""
        root = parse_outline("# A\n\n\n## B")
        assert root.children[0].line_index == 3

    def test_skipped_levels_attach_to_nearest_shallower_node(self):
        """#### directly under # becomes a child at depth 1."""
        root = parse_outline("# A\n#### D\n## B")
        d, b = root.children
        assert (d.label, d.depth, d.level) == ("D", 1, 3)
        assert (b.label, b.depth) == ("B", 1)

    def test_depth_is_parent_depth_plus_one(self, mixed_outline):
        """Depth always grows by one per level of nesting."""
        root = parse_outline(mixed_outline)
        for node in root.walk():
            for child in node.children:
                assert child.depth == node.depth + 1

    def test_children_keep_source_order(self):
        """Children are kept in source order."""
        root = parse_outline("# R\n## Z\n## A\n## M")
        assert [c.label for c in root.children] == ["Z", "A", "M"]

    def test_bullet_heading_nesting(self):
        """Bullets nest under a bullet heading."""
        root = parse_outline("# A\n- ## B\n  - C")
        assert _shape(root) == ("A", 0, [("B", 1, [("C", 2, [])])])

    def test_plain_root_with_bullets(self):
        """A plain first line becomes the root."""
        root = parse_outline("Topic\n- One\n  - Two")
        assert _shape(root) == ("Topic", 0, [("One", 1, [("Two", 2, [])])])

    def test_crlf_line_endings(self):
        """CRLF text parses like LF text."""
        root = parse_outline("# A\r\n## B\r\n")
        assert _shape(root) == ("A", 0, [("B", 1, [])])

    def test_labels_are_sanitized(self):
        """Node labels have inline markup removed."""
        root = parse_outline("# **Bold** root\n## [Link](http://x)")
        assert root.label == "Bold root"
        assert root.children[0].label == "Link"


class TestEmptyAndMalformed:
    """Parsing never fails; empty input yields a placeholder."""

    @pytest.mark.parametrize("text", ["", "\n\n", "   \n\t\n"])
    def test_blank_text_returns_placeholder(self, text):
        """Whitespace-only text gives the placeholder root."""
        root = parse_outline(text)
        assert root.id == EMPTY_NODE_ID
        assert root.label == EMPTY_LABEL
        assert root.depth == 0
        assert root.children == []
        assert root.line_index is None
        assert root.is_placeholder

    def test_parsed_node_is_not_placeholder(self):
        """A real root labelled "Empty" is not the placeholder."""
        assert not parse_outline("# Empty").is_placeholder

    def test_extra_top_level_nodes_are_dropped(self, caplog):
        """Only the first root is kept and the rest are logged."""
        with caplog.at_level(logging.WARNING, logger="outlinemap.outline.parser"):
            root = parse_outline("# First\n## Child\n# Second\n## Other")
        assert root.label == "First"
        assert [c.label for c in root.children] == ["Child"]
        assert "Second" not in [n.label for n in root.walk()]
        assert "2 top-level nodes" in caplog.text

    def test_heading_without_text(self):
        """A bare heading marker gives an empty label."""
        root = parse_outline("#\n## B")
        assert root.label == ""
        assert root.children[0].label == "B"


class TestIdStrategy:
    """Tests for node id derivation."""

    def test_parse_accepts_names(self):
        """Strategies parse from names, dashed names or members."""
        assert IdStrategy.parse("positional") is IdStrategy.POSITIONAL
        assert IdStrategy.parse("content-path") is IdStrategy.CONTENT_PATH
        assert IdStrategy.parse(IdStrategy.CONTENT_PATH) is IdStrategy.CONTENT_PATH

    def test_parse_rejects_unknown(self):
        """Unknown strategy names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown id strategy"):
            IdStrategy.parse("random")

    def test_positional_ids_shift_when_lines_are_inserted(self):
        """Inserting a line renumbers the nodes after it."""
        before = parse_outline("# A\n## B")
        after = parse_outline("# A\n## New\n## B")
        assert before.children[0].id == "node-1"
        assert after.children[1].id == "node-2"

    def test_content_path_ids_survive_insertions(self):
        """Content-path ids ignore line numbers."""
        before = parse_outline("# A\n## B", id_strategy="content_path")
        after = parse_outline("# A\n## New\n\n## B", id_strategy="content_path")
        assert before.children[0].id == after.children[1].id
        assert before.children[0].id.startswith("node-")

    def test_content_path_ids_are_unique_for_repeated_labels(self):
        """Repeated sibling labels get a numeric suffix."""
        root = parse_outline("# A\n## B\n## B", id_strategy=IdStrategy.CONTENT_PATH)
        first, second = root.children
        assert first.id != second.id
        assert second.id == f"{first.id}-1"

    def test_content_path_ids_depend_on_ancestors(self):
        """Equal labels under different parents get different ids."""
        root = parse_outline("# A\n## X\n### Leaf\n## Y\n### Leaf", id_strategy=IdStrategy.CONTENT_PATH)
        leaves = [n for n in root.walk() if n.label == "Leaf"]
        assert leaves[0].id != leaves[1].id
        assert not leaves[1].id.endswith("-1")
