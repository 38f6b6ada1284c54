"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from m3u.cli.helpers import cli  # root group
from m3u.cli import entries_cmds  # noqa: F401
from m3u.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
