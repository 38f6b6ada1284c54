"""Errors raised while constructing readers and reading entries.

Every error derives from :class:`M3UError` so callers can catch the whole
family at once, while the concrete type tells a format problem
(:class:`HeaderNotFound`) apart from an I/O problem (:class:`ReadError`) and
from a single malformed record (:class:`ExtInfNotFound`).
"""
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entry import Entry


class M3UError(Exception):
    """Base class for all errors raised by this package."""


class ReadError(M3UError):
    """Reading a line from the underlying source failed.

    The original exception is kept in ``error`` (and as ``__cause__`` when
    raised with ``from``).
    """

    def __init__(self, error: BaseException):
        super().__init__(str(error))
        self.error = error

    def __str__(self) -> str:
        return str(self.error)


class HeaderNotFound(M3UError):
    """The first non-blank line of an extended playlist was not ``#EXTM3U``."""

    def __init__(self):
        super().__init__('the "#EXTM3U" header was not found')


class ExtInfNotFound(M3UError):
    """An entry was read without a valid ``#EXTINF:`` tag before it.

    Either the tag was omitted or its duration could not be parsed. The entry
    that was read is available as ``entry`` so the caller can keep it as an
    untagged entry.
    """

    def __init__(self, entry: Entry):
        super().__init__('the "#EXTINF:" tag was not found or was incorrectly formatted')
        self.entry = entry


__all__ = ["M3UError", "ReadError", "HeaderNotFound", "ExtInfNotFound"]
