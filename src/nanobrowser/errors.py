"""
Error types raised by the navigation model.

Every error leaves the controller exactly as it was before the failed call,
so a shell can report the message and keep the session going.
"""


class BrowserError(RuntimeError):
    """User-facing error for invalid locations or navigation requests."""


class InvalidLocationError(BrowserError, ValueError):
    """Raised when raw input cannot be parsed as an absolute location."""

    def __init__(self, raw: str, reason: str = "") -> None:
        self.raw = raw
        self.reason = reason
        message = f"Could not load `{raw}`"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NoPreviousEntryError(BrowserError):
    """Raised when moving back from the first history entry."""


class NoNextEntryError(BrowserError):
    """Raised when moving forward from the last history entry."""


class NoHomeSetError(BrowserError):
    """Raised when going home before a home location was set."""


class NoCurrentLocationError(BrowserError):
    """Raised when capturing the current location on an empty history."""


class UnknownFavoriteError(BrowserError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No favorite named `{name}`.")
