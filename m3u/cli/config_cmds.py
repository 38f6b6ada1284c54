"""`m3u config`: print the merged reader/output settings."""

from __future__ import annotations
import click
import json as _json

from .helpers import cli


@cli.command(name="config")
@click.option("--section", "-s", help="Print only one section: reader or output.")
@click.pass_context
def show_config(ctx: click.Context, section: str | None):
    """Print the effective configuration as JSON.

    Shows defaults merged with .env, M3U__* variables and CLI flags.
    """
    data = ctx.obj
    if section:
        key = section.lower()
        if key not in data:
            raise click.UsageError(f"Unknown section '{section}'. Available: {', '.join(sorted(data))}")
        data = {key: data[key]}
    click.echo(_json.dumps(data, indent=2, sort_keys=True))


__all__ = ["show_config"]
