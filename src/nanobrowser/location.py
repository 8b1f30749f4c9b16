"""
Validated absolute locations and the raw-input completion rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import SplitResult, urlsplit, urlunsplit

from .errors import InvalidLocationError

DEFAULT_SCHEME = "http"
PROTOCOL_PREFIX = f"{DEFAULT_SCHEME}://"
KNOWN_SCHEMES = ("http", "https", "ftp", "file")
KNOWN_PREFIXES = tuple(f"{scheme}://" for scheme in KNOWN_SCHEMES)


def complete_url(raw: str) -> str:
    """Let the user leave off the protocol, e.g. ``example.com``."""
    text = raw.strip()
    if text.lower().startswith(KNOWN_PREFIXES):
        return text
    return PROTOCOL_PREFIX + text


@dataclass(frozen=True)
class Location:
    """Absolute URL in canonical form; compare and hash by that string."""

    url: str

    @classmethod
    def parse(cls, text: str) -> Location:
        try:
            parts = urlsplit(text)
        except ValueError as exc:
            raise InvalidLocationError(text, str(exc)) from exc
        scheme = parts.scheme.lower()
        if scheme not in KNOWN_SCHEMES:
            raise InvalidLocationError(text, "not an absolute location")
        if scheme == "file":
            if not parts.path:
                raise InvalidLocationError(text, "missing path")
        else:
            _check_host(text, parts)
        return cls(_canonical(scheme, parts))

    @property
    def scheme(self) -> str:
        return urlsplit(self.url).scheme

    @property
    def host(self) -> str:
        return urlsplit(self.url).hostname or ""

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    def __str__(self) -> str:
        return self.url


def _check_host(text: str, parts: SplitResult) -> None:
    if not parts.hostname:
        raise InvalidLocationError(text, "missing host")
    if any(char.isspace() for char in parts.netloc):
        raise InvalidLocationError(text, "whitespace in host")
    try:
        parts.port  # noqa: B018
    except ValueError as exc:
        raise InvalidLocationError(text, str(exc)) from exc


def _canonical(scheme: str, parts: SplitResult) -> str:
    userinfo, sep, hostport = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{sep}{hostport.lower()}"
    return urlunsplit((scheme, netloc, parts.path, parts.query, parts.fragment))
