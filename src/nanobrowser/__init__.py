"""
Navigation model and text shell for a minimal HTML browser.

Exports:
    Location -- validated absolute URL
    NavigationHistory -- back/next history with forward truncation
    BrowserController -- history, home page and favorites
    BrowserShellEnv -- action-dispatch wrapper used by views
"""

from .controller import BrowserController, BrowserState
from .env import BrowserShellEnv
from .errors import (
    BrowserError,
    InvalidLocationError,
    NoCurrentLocationError,
    NoHomeSetError,
    NoNextEntryError,
    NoPreviousEntryError,
    UnknownFavoriteError,
)
from .history import NavigationHistory
from .labels import Labels, load_labels
from .location import Location, complete_url

__all__ = [
    "Location",
    "complete_url",
    "NavigationHistory",
    "BrowserController",
    "BrowserState",
    "BrowserShellEnv",
    "Labels",
    "load_labels",
    "BrowserError",
    "InvalidLocationError",
    "NoPreviousEntryError",
    "NoNextEntryError",
    "NoHomeSetError",
    "NoCurrentLocationError",
    "UnknownFavoriteError",
]
