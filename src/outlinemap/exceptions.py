"""Exceptions raised by outlinemap."""

from __future__ import annotations


class NodeNotFoundError(Exception):
    """Node id is not present in the index built from the given text.

    Raised by the round-trip writer when the id was taken from an older
    version of the document. Rebuild the index from the current text and
    retry the edit; nothing is written when this is raised.

    Attributes:
        node_id: The id that was looked up
        available: Ids present in the index at lookup time
        message: Human-readable error message
    """

    def __init__(
        self,
        node_id: str,
        available: list[str] | None = None,
        message: str | None = None,
    ) -> None:
        self.node_id = node_id
        self.available = available or []
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        msg = f"Node '{self.node_id}' not found in outline"
        if self.available:
            shown = ", ".join(f"'{a}'" for a in self.available[:10])
            more = len(self.available) - 10
            msg += f"\nAvailable: {shown}"
            if more > 0:
                msg += f" (+{more} more)"
        return msg


class GenerationError(Exception):
    """Outline generation for a topic failed.

    Attributes:
        topic: Topic that was requested
        message: Human-readable error message
    """

    def __init__(self, topic: str, message: str | None = None) -> None:
        self.topic = topic
        self.message = message or f"Could not generate an outline for '{topic}'"
        super().__init__(self.message)
