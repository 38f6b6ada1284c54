"""Reader for the extended M3U format (``#EXTM3U`` + ``#EXTINF:`` tags)."""
from __future__ import annotations
import logging
from typing import Any, Iterator

from .entry import EntryExt, ExtInf, classify
from .errors import ExtInfNotFound, HeaderNotFound
from .reader import DEFAULT_ENCODING, DEFAULT_ERRORS, PathLike, Reader, open_source

logger = logging.getLogger(__name__)

HEADER = "#EXTM3U"
TAG = "#EXTINF:"

# Returned by _read_extinf at the end of input
_END = object()


def parse_duration(text: str) -> float | None:
    """Parse the duration part of an ``#EXTINF:`` tag, or None if invalid.

    Surrounding whitespace, digit separators and non-ASCII digits are
    rejected.
    """
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_extinf(line: str) -> ExtInf | None:
    """Parse a stripped line starting with ``#EXTINF:``.

    The duration and the name are separated by the first comma. A missing
    name becomes the empty string; an unparseable duration yields None.
    """
    duration_text, _, name = line[len(TAG):].partition(",")
    duration_secs = parse_duration(duration_text)
    if duration_secs is None:
        return None
    return ExtInf(duration_secs=duration_secs, name=name.strip())


class EntryExtReader(Reader):
    """Streaming reader yielding ``EntryExt`` records.

    The ``#EXTM3U`` header is read and validated immediately; entries are
    read on demand.

    Raises:
        HeaderNotFound: If the first non-blank line is not the header.
        ReadError: If reading from the source fails.
    """

    def __init__(self, source: Any, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS):
        super().__init__(source, encoding=encoding, errors=errors)
        self._read_header()

    @classmethod
    def open(cls, path: PathLike, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> EntryExtReader:
        """Open a playlist file and construct an extended reader over it.

        The file is closed again when the header is missing or unreadable.
        """
        source = open_source(path, encoding=encoding, errors=errors)
        try:
            return cls(source, encoding=encoding, errors=errors)
        except Exception:
            source.close()
            raise

    def _read_header(self) -> None:
        while True:
            raw = self._read_line()
            line = raw.lstrip()
            if line.startswith(HEADER):
                logger.debug("Found #EXTM3U header")
                return
            # Blank lines may precede the header
            if raw and not line:
                continue
            raise HeaderNotFound()

    def _read_extinf(self):
        """Skip blank and comment lines up to the next ``#EXTINF:`` tag.

        Returns:
            The parsed metadata, None when the tag is malformed, or
            ``_END`` at the end of input.

        Raises:
            ExtInfNotFound: An entry line was found where the tag was expected.
        """
        while True:
            raw = self._read_line()
            if not raw:
                return _END
            line = raw.strip()
            if not line:
                continue
            if line.startswith("#"):
                if not line.startswith(TAG):
                    continue
                extinf = parse_extinf(line)
                if extinf is None:
                    logger.debug(f"Malformed #EXTINF tag: {line!r}")
                return extinf
            # Tag omitted: report the entry so the caller may keep it untagged
            entry = classify(line)
            logger.debug(f"Entry without #EXTINF tag: {entry}")
            raise ExtInfNotFound(entry)

    def read_next_entry(self) -> EntryExt | None:
        """Read the next tagged entry, or None at the end of input.

        Reads the ``#EXTINF:`` tag, then the next non-blank, non-comment
        line as its entry. Metadata with no entry after it is dropped.

        Raises:
            ExtInfNotFound: The tag was missing or malformed; the entry that
                was read is attached to the error.
            ReadError: If reading from the source fails.
        """
        extinf = self._read_extinf()
        if extinf is _END:
            return None
        entry = self._read_next_entry()
        if entry is None:
            return None
        if extinf is None:
            raise ExtInfNotFound(entry)
        return EntryExt(entry=entry, extinf=extinf)

    def entry_exts(self) -> EntryExts:
        """Return an iterator lazily reading ``EntryExt`` records from the source."""
        return EntryExts(self)

    def __iter__(self) -> Iterator[EntryExt]:
        return self.entry_exts()


class EntryExts:
    """Single-pass iterator over an ``EntryExtReader``.

    Ends permanently at the end of input. ``ExtInfNotFound`` and
    ``ReadError`` are raised from ``next()``; pulling again afterwards
    continues with the next record.
    """

    def __init__(self, reader: EntryExtReader):
        self._reader = reader
        self._done = False

    def __iter__(self) -> EntryExts:
        return self

    def __next__(self) -> EntryExt:
        if self._done:
            raise StopIteration
        entry_ext = self._reader.read_next_entry()
        if entry_ext is None:
            self._done = True
            raise StopIteration
        return entry_ext


__all__ = ["EntryExtReader", "EntryExts", "parse_extinf", "parse_duration", "HEADER", "TAG"]
