"""
Action-dispatch wrapper around :class:`BrowserController`.

Views call :meth:`BrowserShellEnv.step` for every user intent and redraw
from the returned state; they never hold on to controller internals.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .controller import BrowserController
from .errors import BrowserError
from .labels import DEFAULT_LANGUAGE, Labels, load_labels

TITLE = "NanoBrowser"
DEFAULT_START_PAGE = "http://www.cs.duke.edu/rcd"
BLANK = " "

ACTION_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "go": {
        "description": "Load a typed address; `http://` is added when no scheme is given.",
        "required": ["location"],
        "optional": [],
    },
    "follow": {
        "description": "Follow a hyperlink on the current page.",
        "required": ["location"],
        "optional": [],
    },
    "hover": {
        "description": "Show where a hyperlink leads; omit `location` to clear the status.",
        "required": [],
        "optional": ["location"],
    },
    "back": {
        "description": "Move to the previous page in the history.",
        "required": [],
        "optional": [],
    },
    "next": {
        "description": "Move to the next page in the history.",
        "required": [],
        "optional": [],
    },
    "home": {
        "description": "Load the home page, if one is set.",
        "required": [],
        "optional": [],
    },
    "set_home": {
        "description": "Make the current page the home page.",
        "required": [],
        "optional": [],
    },
    "add_favorite": {
        "description": "Save the current page under `name`.",
        "required": ["name"],
        "optional": [],
    },
    "favorite": {
        "description": "Load the page saved under `name`.",
        "required": ["name"],
        "optional": [],
    },
}


class BrowserShellEnv:
    """Minimal shell API for the navigation model."""

    def __init__(
        self,
        start_page: str | None = DEFAULT_START_PAGE,
        language: str = DEFAULT_LANGUAGE,
        labels: Mapping[str, str] | None = None,
    ) -> None:
        self.start_page = start_page
        self.labels: Labels = load_labels(language, labels)
        self.controller = BrowserController()
        self.status = BLANK

    @property
    def action_space(self) -> Dict[str, Dict[str, Any]]:
        return ACTION_DEFINITIONS

    def reset(self) -> Dict[str, Any]:
        self.controller = BrowserController()
        self.status = BLANK
        if self.start_page:
            self.controller.navigate_to(self.start_page)
        return self.get_state()

    def step(self, action: str, **kwargs: Any) -> Dict[str, Any]:
        action = action.lower()
        if action not in ACTION_DEFINITIONS:
            raise BrowserError(f"Unknown action `{action}`")
        spec = ACTION_DEFINITIONS[action]
        missing = [arg for arg in spec["required"] if arg not in kwargs]
        if missing:
            raise BrowserError(f"Missing required args for `{action}`: {missing}")
        unexpected = [
            arg for arg in kwargs if arg not in spec["required"] + spec["optional"]
        ]
        if unexpected:
            raise BrowserError(f"Unexpected args for `{action}`: {unexpected}")
        handler = getattr(self, f"_do_{action}")
        handler(**kwargs)
        return self.get_state()

    def load_error(self, location: str) -> str:
        return self.labels.format("LoadError", location=location)

    def get_state(self) -> Dict[str, Any]:
        snapshot = self.controller.state()
        buttons = {
            "BackCommand": snapshot.can_go_back,
            "NextCommand": snapshot.can_go_next,
            "HomeCommand": snapshot.has_home,
        }
        return {
            "title": TITLE,
            "location": str(snapshot.current) if snapshot.current else None,
            "cursor": snapshot.cursor,
            "history": [
                {"cursor": idx, "url": str(entry)}
                for idx, entry in enumerate(snapshot.history)
            ],
            "can_go_back": snapshot.can_go_back,
            "can_go_next": snapshot.can_go_next,
            "has_home": snapshot.has_home,
            "home": str(snapshot.home) if snapshot.home else None,
            "favorites": [
                {"name": name, "url": str(self.controller.favorite(name))}
                for name in snapshot.favorites
            ],
            "status": self.status,
            "buttons": buttons,
            "available_actions": self.action_space,
        }

    def pretty_print(self, state: Dict[str, Any] | None = None) -> None:
        state = state or self.get_state()
        print("-" * 72)
        print(state["title"])
        print("Location:", state["location"] or "(none)")
        print(
            "  ".join(
                f"[{self.labels[key]}]" if enabled else f"({self.labels[key]})"
                for key, enabled in state["buttons"].items()
            )
        )
        print("History:")
        if state["history"]:
            for entry in state["history"]:
                marker = "*" if entry["cursor"] == state["cursor"] else " "
                print(f" {marker}[{entry['cursor']}] {entry['url']}")
        else:
            print("  (empty)")
        print(f"{self.labels['FavoriteFirstItem']}:")
        if state["favorites"]:
            for favorite in state["favorites"]:
                print(f"  {favorite['name']!r} -> {favorite['url']}")
        else:
            print("  (none)")
        if state["home"]:
            print("Home:", state["home"])
        print("-" * 72)
        print(state["status"])

    # ---------------------------------------------------------------- actions
    def _do_go(self, location: str) -> None:
        self.controller.navigate_to(location)

    def _do_follow(self, location: str) -> None:
        self.controller.navigate_to(location)
        self.status = BLANK

    def _do_hover(self, location: str | None = None) -> None:
        self.status = str(location) if location else BLANK

    def _do_back(self) -> None:
        self.controller.go_back()

    def _do_next(self) -> None:
        self.controller.go_next()

    def _do_home(self) -> None:
        self.controller.go_home()

    def _do_set_home(self) -> None:
        self.controller.set_home()

    def _do_add_favorite(self, name: str) -> None:
        self.controller.add_favorite(name)

    def _do_favorite(self, name: str) -> None:
        self.controller.go_to_favorite(name)
