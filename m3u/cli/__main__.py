"""Module entry point for `python -m m3u.cli`."""
from m3u.cli import cli

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    cli()
