"""Shared streaming machinery for the M3U readers.

A reader pulls one line at a time from a line source and reads no more than
strictly necessary to produce the next entry. A line source is any object
with a ``readline()`` method returning ``str`` or ``bytes``, where an empty
value signals the end of input (text files, ``io.BufferedReader``,
``io.StringIO``...). Byte lines are decoded with the reader's encoding.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import IO, Any, Union

from .entry import Entry, classify
from .errors import ReadError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
DEFAULT_ERRORS = "strict"

PathLike = Union[str, Path]


class Reader:
    """Base reader owning a line source.

    Subclasses implement ``read_next_entry`` for the entry type they produce.
    """

    def __init__(self, source: Any, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS):
        self._source = source
        self.encoding = encoding
        self.errors = errors

    def _read_line(self) -> str:
        """Read the next raw line; ``''`` means end of input.

        Raises:
            ValueError: If the source was handed back with ``into_inner``.
            ReadError: If the source fails or a byte line cannot be decoded.
        """
        if self._source is None:
            raise ValueError("reader has no source; it was handed back by into_inner()")
        try:
            line = self._source.readline()
            if isinstance(line, bytes):
                line = line.decode(self.encoding, self.errors)
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(e) from e
        return line

    def _read_next_entry(self) -> Entry | None:
        """Skip blank and comment lines and classify the next entry line."""
        while True:
            raw = self._read_line()
            if not raw:
                return None
            line = raw.lstrip()
            # Blank line, or any comment/tag (the basic format knows no tags)
            if not line or line.startswith("#"):
                continue
            return classify(line.rstrip())

    def into_inner(self) -> Any:
        """Hand back the inner line source, detaching it from this reader.

        The reader cannot read afterwards; further reads raise ValueError.
        """
        source, self._source = self._source, None
        return source

    def close(self) -> None:
        """Close the inner line source if it supports closing."""
        close = getattr(self._source, "close", None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_source(path: PathLike, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> IO[str]:
    """Open ``path`` as a text line source decoded with ``encoding``.

    Decoding happens before lines are split, so encodings that are not
    ASCII-compatible (UTF-16, UTF-32) are read correctly.

    Raises:
        ReadError: If the file cannot be opened.
    """
    try:
        source = open(path, "r", encoding=encoding, errors=errors)
    except OSError as e:
        raise ReadError(e) from e
    logger.debug(f"Opened playlist {path}")
    return source


__all__ = ["Reader", "open_source", "DEFAULT_ENCODING", "DEFAULT_ERRORS"]
