"""Playlist listing commands (basic and extended format)."""

from __future__ import annotations
import click
import logging

from .helpers import cli
from ..config_types import AppConfig
from ..entry_ext_reader import EntryExtReader
from ..entry_reader import EntryReader
from ..errors import ExtInfNotFound, M3UError
from ..utils.output import (
    count_badge,
    error,
    format_entry,
    format_entry_ext,
    format_untagged,
    to_json_line,
    warning,
)

logger = logging.getLogger(__name__)

PLAYLIST = click.Path(exists=False, dir_okay=False)


def _use_json(cfg: AppConfig, as_json: bool | None) -> bool:
    if as_json is None:
        return cfg.output.format == 'json'
    return as_json


@cli.command()
@click.argument("playlist", type=PLAYLIST)
@click.option("--json/--text", "as_json", default=None, help="Output JSON lines instead of text (overrides config)")
@click.pass_context
def entries(ctx: click.Context, playlist: str, as_json: bool | None):
    """List the entries of a plain M3U playlist.

    Every line starting with '#' is skipped, #EXTINF tags included.
    """
    cfg = AppConfig.from_dict(ctx.obj)
    json_out = _use_json(cfg, as_json)
    count = 0
    try:
        with EntryReader.open(playlist, encoding=cfg.reader.encoding, errors=cfg.reader.errors) as reader:
            for entry in reader.entries():
                click.echo(to_json_line(entry) if json_out else format_entry(entry))
                count += 1
    except M3UError as e:
        click.echo(error(f"{playlist}: {e}"), err=True)
        ctx.exit(1)

    logger.info(f"Read {count} entries from {playlist}")
    if not json_out:
        click.echo(count_badge(count, "entries"), err=True)


@cli.command(name="ext")
@click.argument("playlist", type=PLAYLIST)
@click.option("--json/--text", "as_json", default=None, help="Output JSON lines instead of text (overrides config)")
@click.option("--lenient/--strict", default=None,
              help="Keep entries without a valid #EXTINF tag instead of stopping (overrides config)")
@click.pass_context
def ext(ctx: click.Context, playlist: str, as_json: bool | None, lenient: bool | None):
    """List the tagged entries of an extended (#EXTM3U) playlist.

    In strict mode the command stops with exit code 1 at the first entry
    without a valid #EXTINF tag. In lenient mode such entries are listed
    as untagged and reading continues.
    """
    cfg = AppConfig.from_dict(ctx.obj)
    json_out = _use_json(cfg, as_json)
    if lenient is None:
        lenient = bool(cfg.output.lenient)

    count = 0
    untagged = 0
    try:
        with EntryExtReader.open(playlist, encoding=cfg.reader.encoding, errors=cfg.reader.errors) as reader:
            records = reader.entry_exts()
            while True:
                try:
                    entry_ext = next(records)
                except StopIteration:
                    break
                except ExtInfNotFound as e:
                    if not lenient:
                        raise
                    untagged += 1
                    click.echo(to_json_line(e.entry) if json_out else format_untagged(e.entry))
                    continue
                count += 1
                click.echo(to_json_line(entry_ext) if json_out else format_entry_ext(entry_ext))
    except ExtInfNotFound as e:
        click.echo(error(f"{playlist}: {e} (entry: {e.entry})"), err=True)
        ctx.exit(1)
    except M3UError as e:
        click.echo(error(f"{playlist}: {e}"), err=True)
        ctx.exit(1)

    logger.info(f"Read {count} tagged and {untagged} untagged entries from {playlist}")
    if not json_out:
        click.echo(count_badge(count, "entries"), err=True)
        if untagged:
            click.echo(warning(f"{untagged} entries without a valid #EXTINF tag"), err=True)


__all__ = ["entries", "ext"]
