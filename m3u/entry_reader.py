"""Reader for the original, non-extended M3U format."""
from __future__ import annotations
from typing import Iterator

from .entry import Entry
from .reader import DEFAULT_ENCODING, DEFAULT_ERRORS, PathLike, Reader, open_source


class EntryReader(Reader):
    """Streaming reader yielding one ``Entry`` per non-blank, non-comment line.

    Every line starting with ``#`` is a comment here, ``#EXTINF:`` tags
    included. No validation is performed at construction.
    """

    @classmethod
    def open(cls, path: PathLike, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> EntryReader:
        """Open a playlist file and construct a reader over it.

        Raises:
            ReadError: If the file cannot be opened.
        """
        return cls(open_source(path, encoding=encoding, errors=errors), encoding=encoding, errors=errors)

    def read_next_entry(self) -> Entry | None:
        """Read the next entry, or None at the end of input.

        Raises:
            ReadError: If reading from the source fails. No partial entry is
                returned and the reader stays usable.
        """
        return self._read_next_entry()

    def entries(self) -> Entries:
        """Return an iterator lazily reading entries from the source."""
        return Entries(self)

    def __iter__(self) -> Iterator[Entry]:
        return self.entries()


class Entries:
    """Single-pass iterator over an ``EntryReader``.

    Ends permanently once the reader reports the end of input. Errors are
    raised from ``next()``; catching one and pulling again resumes at the
    source's current position.
    """

    def __init__(self, reader: EntryReader):
        self._reader = reader
        self._done = False

    def __iter__(self) -> Entries:
        return self

    def __next__(self) -> Entry:
        if self._done:
            raise StopIteration
        entry = self._reader.read_next_entry()
        if entry is None:
            self._done = True
            raise StopIteration
        return entry


__all__ = ["EntryReader", "Entries"]
