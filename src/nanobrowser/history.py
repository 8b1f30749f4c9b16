"""
Ordered history of visited locations with a cursor on the displayed one.
"""

from __future__ import annotations

import logging

from .errors import NoNextEntryError, NoPreviousEntryError
from .location import Location

logger = logging.getLogger(__name__)


class NavigationHistory:
    """Back/next stack of locations.

    Visiting a new location from a back-navigated position erases the
    forward entries before the new one is appended.
    """

    def __init__(self) -> None:
        self._entries: list[Location] = []
        self._cursor = -1

    # ------------------------------------------------------------------ state
    @property
    def cursor(self) -> int:
        """Index of the current entry, ``-1`` while the history is empty."""
        return self._cursor

    @property
    def entries(self) -> tuple[Location, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def current(self) -> Location | None:
        if not self._entries:
            return None
        return self._entries[self._cursor]

    def can_go_back(self) -> bool:
        return self._cursor > 0

    def can_go_next(self) -> bool:
        return self._cursor < len(self._entries) - 1

    # ---------------------------------------------------------------- actions
    def append(self, location: Location) -> None:
        dropped = len(self._entries) - (self._cursor + 1)
        if dropped:
            del self._entries[self._cursor + 1 :]
            logger.debug("Discarded %d forward entries", dropped)
        self._entries.append(location)
        self._cursor = len(self._entries) - 1

    def back(self) -> Location:
        if not self.can_go_back():
            raise NoPreviousEntryError("No previous page in history.")
        self._cursor -= 1
        return self._entries[self._cursor]

    def next(self) -> Location:
        if not self.can_go_next():
            raise NoNextEntryError("No next page in history.")
        self._cursor += 1
        return self._entries[self._cursor]
