"""Playlist entry types and the line classifier.

An entry line is either a URL with a host (``UrlEntry``) or anything else,
kept verbatim as a path (``PathEntry``). Extended playlists pair each entry
with the ``#EXTINF:`` metadata read before it (``EntryExt``).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Union
from urllib.parse import SplitResult, urlsplit


@dataclass(frozen=True)
class UrlEntry:
    """An entry that parsed as a URL with a non-empty host."""
    url: SplitResult

    @property
    def host(self) -> str:
        return self.url.hostname or ""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "url", "value": str(self)}

    def __str__(self) -> str:
        return self.url.geturl()


@dataclass(frozen=True)
class PathEntry:
    """An entry that is not a usable URL, kept as the stripped line text."""
    path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "path", "value": self.path}

    def __str__(self) -> str:
        return self.path


Entry = Union[UrlEntry, PathEntry]


@dataclass(frozen=True)
class ExtInf:
    """Metadata carried by an ``#EXTINF:<duration>,<name>`` tag."""
    duration_secs: float
    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"duration_secs": self.duration_secs, "name": self.name}


@dataclass(frozen=True)
class EntryExt:
    """An entry of the extended format together with its ``#EXTINF:`` metadata."""
    entry: Entry
    extinf: ExtInf

    def to_dict(self) -> Dict[str, Any]:
        return {"entry": self.entry.to_dict(), "extinf": self.extinf.to_dict()}


def parse_url(text: str) -> SplitResult | None:
    """Parse ``text`` as an absolute URL.

    Returns None when the text has no scheme, an invalid port or a malformed
    network location. The host may still be empty on success.
    """
    try:
        url = urlsplit(text)
        # Port is validated lazily by urllib
        url.port
    except ValueError:
        return None
    if not url.scheme:
        return None
    if url.hostname and any(ch.isspace() for ch in url.hostname):
        return None
    return url


def classify(line: str) -> Entry:
    """Classify one already-stripped entry line.

    A URL is only returned when it has a host, so hostless URLs such as
    ``file:relative/path`` or Windows drive paths (``C:\\music\\a.mp3``) are
    treated as paths.

    Args:
        line: Entry line without leading/trailing whitespace.

    Returns:
        UrlEntry or PathEntry; never fails.
    """
    url = parse_url(line)
    if url is not None and url.hostname:
        return UrlEntry(url)
    return PathEntry(line)


__all__ = ["Entry", "UrlEntry", "PathEntry", "ExtInf", "EntryExt", "parse_url", "classify"]
