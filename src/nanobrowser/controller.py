"""
Navigation model behind the browser shell: history, home page and favorites.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

from .errors import (
    InvalidLocationError,
    NoCurrentLocationError,
    NoHomeSetError,
    NoNextEntryError,
    NoPreviousEntryError,
    UnknownFavoriteError,
)
from .history import NavigationHistory
from .location import Location, complete_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserState:
    """Everything a view needs to redraw itself after a command."""

    current: Location | None
    cursor: int | None
    history: tuple[Location, ...]
    can_go_back: bool
    can_go_next: bool
    has_home: bool
    home: Location | None
    favorites: tuple[str, ...]


class BrowserController:
    """Single entry point for every navigation request made by a view."""

    def __init__(self) -> None:
        self.history = NavigationHistory()
        self._home: Location | None = None
        self._favorites: Dict[str, Location] = {}

    # ------------------------------------------------------------------ state
    @property
    def home(self) -> Location | None:
        return self._home

    def current(self) -> Location | None:
        return self.history.current()

    def can_go_back(self) -> bool:
        return self.history.can_go_back()

    def can_go_next(self) -> bool:
        return self.history.can_go_next()

    def has_home(self) -> bool:
        return self._home is not None

    def favorite(self, name: str) -> Location:
        try:
            return self._favorites[name]
        except KeyError:
            raise UnknownFavoriteError(name) from None

    def favorite_names(self) -> list[str]:
        return list(self._favorites)

    def state(self) -> BrowserState:
        history = self.history
        return BrowserState(
            current=history.current(),
            cursor=None if history.is_empty() else history.cursor,
            history=history.entries,
            can_go_back=history.can_go_back(),
            can_go_next=history.can_go_next(),
            has_home=self.has_home(),
            home=self._home,
            favorites=tuple(self._favorites),
        )

    # ---------------------------------------------------------------- actions
    def navigate_to(self, raw: str | Location) -> Location:
        """Resolve user input to a location and make it the current entry.

        Input without a known scheme is treated as ``http://<input>``. A
        rejected input raises :class:`InvalidLocationError` and leaves the
        history untouched.
        """
        text = str(raw)
        try:
            location = Location.parse(complete_url(text))
        except InvalidLocationError as exc:
            logger.info("Rejected location %r", text)
            raise InvalidLocationError(text, exc.reason) from exc
        self.history.append(location)
        logger.debug("Navigated to %s (%d entries)", location, len(self.history))
        return location

    def go_back(self) -> Location:
        if not self.history.can_go_back():
            raise NoPreviousEntryError("No previous page in history.")
        location = self.history.back()
        logger.debug("Back to %s", location)
        return location

    def go_next(self) -> Location:
        if not self.history.can_go_next():
            raise NoNextEntryError("No next page in history.")
        location = self.history.next()
        logger.debug("Forward to %s", location)
        return location

    def go_home(self) -> Location:
        # same path as typing the address: adds an entry, drops forward history
        if self._home is None:
            raise NoHomeSetError("No home page has been set.")
        return self.navigate_to(str(self._home))

    def set_home(self) -> Location:
        self._home = self._require_current("set a home page")
        logger.debug("Home set to %s", self._home)
        return self._home

    def add_favorite(self, name: str) -> Location:
        location = self._require_current("add a favorite")
        self._favorites[name] = location
        logger.debug("Favorite %r -> %s", name, location)
        return location

    def go_to_favorite(self, name: str) -> Location:
        return self.navigate_to(str(self.favorite(name)))

    # ---------------------------------------------------------------- helpers
    def _require_current(self, action: str) -> Location:
        location = self.history.current()
        if location is None:
            raise NoCurrentLocationError(f"Cannot {action} before visiting a page.")
        return location
