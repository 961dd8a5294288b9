"""Outline CLI commands: tree, index, layout, rename, generate."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from outlinemap.cli._format import format_number, print_json, print_lines, print_table, truncate_label
from outlinemap.cli._logging import configure_logging
from outlinemap.config import OutlineMapConfig, load_config
from outlinemap.exceptions import GenerationError, NodeNotFoundError
from outlinemap.outline.index import build_node_index
from outlinemap.outline.nodes import OutlineNode
from outlinemap.outline.parser import IdStrategy, parse_outline
from outlinemap.outline.writer import update_node_label
from outlinemap.pipeline import GeometryBundle, RenderSession, validate_links
from outlinemap.sources import generate_outline
from outlinemap.viz.geometry import format_issues

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_outline(path: Path) -> str:
    """Read outline text, keeping line endings as written."""
    if not path.is_file():
        print(f"Error: File not found: {path}")
        raise typer.Exit(1)
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _id_strategy(config: OutlineMapConfig) -> IdStrategy:
    try:
        return IdStrategy.parse(config.id_strategy)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(1) from e


def _tree_to_dict(node: OutlineNode) -> dict[str, Any]:
    return {
        "id": node.id,
        "label": node.label,
        "depth": node.depth,
        "lineIndex": node.line_index,
        "children": [_tree_to_dict(child) for child in node.children],
    }


def _rich_tree(node: OutlineNode, branch: Tree | None = None) -> Tree:
    text = f"{escape(node.label)} [dim]({escape(node.id)})[/dim]"
    branch = Tree(text) if branch is None else branch.add(text)
    for child in node.children:
        _rich_tree(child, branch)
    return branch


def _geometry_rows(bundle: GeometryBundle) -> list[list[str]]:
    rows = []
    for node in bundle.nodes:
        rows.append(
            [
                node.id,
                truncate_label(node.label),
                str(node.depth),
                node.side or "—",
                "box" if node.has_rectangle else "dot",
                format_number(node.along),
                format_number(node.cross),
                format_number(node.width),
                format_number(node.height),
            ]
        )
    return rows


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def register_commands(app: typer.Typer) -> None:
    """Register the outline commands as top-level commands on the app."""

    @app.callback()
    def main_callback(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ):
        """Turn indented outlines into mind-map geometry."""
        configure_logging(verbose)

    @app.command("tree")
    def tree_cmd(
        file: Annotated[Path, typer.Argument(help="Outline file")],
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
        output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
    ):
        """Show the parsed outline tree."""
        config = load_config()
        root = parse_outline(_read_outline(file), id_strategy=_id_strategy(config))

        if as_json:
            print_json("tree", _tree_to_dict(root), output)
            return

        Console(highlight=False).print(_rich_tree(root))

    @app.command("index")
    def index_cmd(
        file: Annotated[Path, typer.Argument(help="Outline file")],
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    ):
        """List node ids with the source line each one came from."""
        config = load_config()
        root = parse_outline(_read_outline(file), id_strategy=_id_strategy(config))
        index = build_node_index(root)

        if as_json:
            data = {
                node_id: {"lineIndex": entry.line_index, "depth": entry.depth, "label": entry.label}
                for node_id, entry in index.items()
            }
            print_json("index", data)
            return

        if not index:
            print("\n  Outline is empty.")
            return

        headers = ["Id", "Line", "Depth", "Label"]
        rows = [
            [node_id, str(entry.line_index + 1), str(entry.depth), truncate_label(entry.label)]
            for node_id, entry in sorted(index.items(), key=lambda item: item[1].line_index)
        ]
        print(f"\n  Nodes ({len(index)}):\n")
        print_lines(print_table(headers, rows))

    @app.command("layout")
    def layout_cmd(
        file: Annotated[Path, typer.Argument(help="Outline file")],
        mode: Annotated[str | None, typer.Option("--mode", help="'right' or 'bidirectional'")] = None,
        compact: Annotated[bool | None, typer.Option("--compact/--no-compact", help="Small-screen sizing")] = None,
        width: Annotated[int | None, typer.Option("--width", help="Viewport width in pixels")] = None,
        height: Annotated[int | None, typer.Option("--height", help="Viewport height in pixels")] = None,
        scheme: Annotated[str | None, typer.Option("--scheme", help="Colour scheme")] = None,
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
        output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
        check: Annotated[bool, typer.Option("--check", help="Validate link endpoints")] = False,
    ):
        """Compute node positions, box sizes and the fit transform."""
        config = load_config()
        try:
            options = config.render_options(layout=mode, compact=compact, color_scheme=scheme)
            viewport = config.viewport(width, height)
        except ValueError as e:
            print(f"Error: {e}")
            raise typer.Exit(1) from e

        bundle = RenderSession().render(_read_outline(file), viewport, options, document_id=str(file))

        if check:
            issues = validate_links(bundle)
            if issues:
                print(f"Error: {len(issues)} link(s) do not meet their nodes:")
                print(format_issues(issues))
                raise typer.Exit(1)

        if as_json:
            print_json("layout", bundle.to_dict(), output)
            return

        t = bundle.transform
        print(
            f"\nLayout: {options.layout.mode.value} | {len(bundle.nodes)} nodes | {len(bundle.links)} links"
            f" | scale {t.scale:.3f} | translate ({t.translate_x:.1f}, {t.translate_y:.1f})\n"
        )
        headers = ["Id", "Label", "Depth", "Side", "Shape", "X", "Y", "Width", "Height"]
        print_lines(print_table(headers, _geometry_rows(bundle)))
        if check:
            print("\n  All links connect to their nodes.")

    @app.command("rename")
    def rename_cmd(
        file: Annotated[Path, typer.Argument(help="Outline file")],
        node_id: Annotated[str, typer.Argument(help="Node id as listed by 'outlinemap index'")],
        label: Annotated[str, typer.Argument(help="New label")],
        in_place: Annotated[bool, typer.Option("--in-place", help="Rewrite the file instead of printing")] = False,
    ):
        """Change one node's label, leaving every other line untouched."""
        config = load_config()
        text = _read_outline(file)
        try:
            updated = update_node_label(text, node_id, label, id_strategy=_id_strategy(config))
        except NodeNotFoundError as e:
            print(f"Error: {e}")
            raise typer.Exit(1) from e

        if in_place:
            with open(file, "w", encoding="utf-8", newline="") as f:
                f.write(updated)
            print(f"Renamed {node_id} in {file}")
            return

        print(updated)

    @app.command("generate")
    def generate_cmd(
        topic: Annotated[str, typer.Argument(help="Topic of the outline")],
        output: Annotated[str | None, typer.Option("--output", help="Write outline to file")] = None,
    ):
        """Write a starter outline for a topic."""
        try:
            text = generate_outline(topic)
        except GenerationError as e:
            print(f"Error: {e}")
            raise typer.Exit(1) from e

        if output:
            with open(output, "w", encoding="utf-8") as f:
                f.write(text + "\n")
            print(f"Wrote outline for '{topic}' to {output}")
            return

        print(text)
