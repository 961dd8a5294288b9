"""Log output for the command-line tool."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "outlinemap-cli"


def configure_logging(verbose: bool = False) -> None:
    """Route the ``outlinemap`` loggers through rich.

    Warnings are always shown; ``verbose`` lowers the threshold to DEBUG.
    Calling this again only updates the level.
    """
    logger = logging.getLogger("outlinemap")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return

    handler = RichHandler(console=Console(stderr=True), show_time=verbose, show_path=verbose, markup=False)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
