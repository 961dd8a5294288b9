"""Memo stores for measured node geometry.

Measuring a label means wrapping it and sizing its box, and the result
only depends on the node's id, its label and the screen size. A render
session keeps those results in a store that lives as long as one
document is open, and empties it when another document is opened.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class CacheBackend(Protocol):
    """Anything a render session can keep measurements in."""

    def get(self, key: Hashable) -> tuple[bool, Any]:
        """Return (hit, value); a stored None is still a hit."""
        ...

    def set(self, key: Hashable, value: Any) -> None: ...

    def clear(self) -> None: ...


class InMemoryCache:
    """Measurements for the open document, held in a plain dict.

    Nothing is dropped until ``clear()``; a session calls it when the
    document changes, so the store never outgrows one outline's history.

    Example:
        >>> store = InMemoryCache()
        >>> store.set(("node-0", "Topic", False), "measured")
        >>> store.get(("node-0", "Topic", False))
        (True, 'measured')
        >>> store.get(("node-0", "Subject", False))
        (False, None)
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, Any] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> tuple[bool, Any]:
        try:
            return True, self._entries[key]
        except KeyError:
            return False, None

    def set(self, key: Hashable, value: Any) -> None:
        self._entries[key] = value

    def clear(self) -> None:
        if self._entries:
            logger.debug("Dropping %d measured node(s)", len(self._entries))
        self._entries.clear()
