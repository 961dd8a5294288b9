"""Outlinemap CLI: inspect, lay out and edit outline files.

Entry point for the `outlinemap` command.

Commands:
    tree        Show the parsed outline tree
    index       List node ids and their source lines
    layout      Compute positions, box sizes and the fit transform
    rename      Change one node's label in place
    generate    Write a starter outline for a topic
"""

from __future__ import annotations


def create_app():
    """Create the Typer app with all commands."""
    import typer

    from outlinemap.cli.commands import register_commands

    app = typer.Typer(
        name="outlinemap",
        help="Turn indented outlines into mind-map geometry.",
        no_args_is_help=True,
    )
    register_commands(app)
    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
