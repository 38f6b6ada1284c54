"""Output formatting utilities for consistent CLI reporting."""

import json
import math

import click

from ..entry import Entry, EntryExt


def error(text: str, prefix: str = "✗") -> str:
    return f"{click.style(prefix, fg='red')} {text}"


def warning(text: str, prefix: str = "⚠") -> str:
    return f"{click.style(prefix, fg='yellow')} {text}"


def count_badge(count: int, label: str, color: str = 'cyan') -> str:
    """Format a count badge.

    Args:
        count: Count to display
        label: Label for the count
        color: Color for the count (default: cyan)

    Returns:
        Formatted count badge
    """
    return f"{click.style(str(count), fg=color, bold=True)} {label}"


def format_duration(duration_secs: float) -> str:
    """Render a duration without a trailing ``.0`` for whole seconds."""
    if math.isfinite(duration_secs) and float(duration_secs).is_integer():
        return f"{int(duration_secs)}s"
    return f"{duration_secs}s"


def format_entry(entry: Entry) -> str:
    """Format a basic entry as ``<kind>  <value>``."""
    kind = entry.to_dict()['type']
    return f"{click.style(f'{kind:<4}', fg='blue')}  {entry}"


def format_entry_ext(entry_ext: EntryExt) -> str:
    """Format an extended entry as ``[<duration>] <name> -> <entry>``."""
    extinf = entry_ext.extinf
    duration = click.style(f"[{format_duration(extinf.duration_secs)}]", fg='cyan')
    name = extinf.name or click.style('(no name)', fg='bright_black')
    return f"{duration} {name} -> {entry_ext.entry}"


def format_untagged(entry: Entry) -> str:
    """Format an entry of an extended playlist that had no valid #EXTINF tag."""
    return f"{click.style('[untagged]', fg='yellow')} {entry}"


def to_json_line(record) -> str:
    """Serialize an entry record (anything with ``to_dict``) as one JSON line."""
    return json.dumps(record.to_dict(), ensure_ascii=False, sort_keys=True)


__all__ = [
    "error",
    "warning",
    "count_badge",
    "format_duration",
    "format_entry",
    "format_entry_ext",
    "format_untagged",
    "to_json_line",
]
