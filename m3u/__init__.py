"""Top-level package for m3u-stream-reader (m3u).

Streaming readers for M3U and extended M3U playlists. Version identifier is
defined in :mod:`m3u.version` to keep a single source of truth.
"""

from .version import __version__  # re-export
from .entry import Entry, EntryExt, ExtInf, PathEntry, UrlEntry, classify
from .entry_ext_reader import EntryExtReader, EntryExts
from .entry_reader import Entries, EntryReader
from .errors import ExtInfNotFound, HeaderNotFound, M3UError, ReadError

__all__ = [
    "__version__",
    "Entry",
    "EntryExt",
    "ExtInf",
    "PathEntry",
    "UrlEntry",
    "classify",
    "EntryReader",
    "Entries",
    "EntryExtReader",
    "EntryExts",
    "M3UError",
    "ReadError",
    "HeaderNotFound",
    "ExtInfNotFound",
]
