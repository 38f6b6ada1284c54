from __future__ import annotations
import click

from ..config import deep_merge, load_config
from ..version import __version__


def build_overrides(encoding: str | None, log_level: str | None) -> dict:
    """Turn root-level CLI flags into a config overrides dict."""
    overrides: dict = {}
    if encoding is not None:
        overrides.setdefault('reader', {})['encoding'] = encoding
    if log_level is not None:
        overrides['log_level'] = log_level
    return overrides


@click.group()
@click.version_option(version=__version__, prog_name="m3u-stream-reader")
@click.option('--encoding', default=None, help='Text encoding of playlist files (overrides config)')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Logging level (overrides config)')
@click.pass_context
def cli(ctx: click.Context, encoding: str | None, log_level: str | None):
    """Streaming reader for M3U and extended M3U playlists.

    \b
    Examples:
      m3u entries playlist.m3u          # List entries of a plain playlist
      m3u ext playlist.m3u8 --json      # Extended playlist as JSON lines
      m3u ext playlist.m3u8 --lenient   # Keep entries missing #EXTINF
      m3u config                        # Show effective configuration

    \b
    Configuration is read from M3U__SECTION__KEY environment variables
    and an optional .env file, e.g. M3U__READER__ENCODING=latin-1.
    """
    if isinstance(ctx.obj, dict):
        # Preloaded config (tests); still honor CLI flags
        if encoding is not None or log_level is not None:
            ctx.obj = deep_merge(ctx.obj, build_overrides(encoding, log_level))
        return
    try:
        ctx.obj = load_config(build_overrides(encoding, log_level))
    except ValueError as e:
        raise click.UsageError(str(e))


__all__ = ["cli", "build_overrides"]
