from __future__ import annotations
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_playlist(tmp_path: Path) -> Callable[..., Path]:
    """Write playlist text to a file under tmp_path and return its path."""
    def _write(text: str, name: str = 'playlist.m3u', encoding: str = 'utf-8') -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path
    return _write


@pytest.fixture
def sample_ext_text() -> str:
    return (
        "#EXTM3U\n"
        "#EXTINF:123,Sample Artist - Sample Title\n"
        "C:\\Documents and Settings\\I\\My Music\\Sample.mp3\n"
        "\n"
        "# plain comment\n"
        "#EXTINF:321,Example Artist - Example Title\n"
        "http://www.example.com/Example.mp3\n"
        "#EXTINF:-1,Live Stream\n"
        "  https://radio.example.org:8000/live  \n"
    )
