"""Subcommand modules for fetchfile.

Provides register_commands() which uses deferred imports to keep
``fetchfile --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from fetchfile.commands.check import check
    from fetchfile.commands.codecs import codecs
    from fetchfile.commands.fetch import fetch
    from fetchfile.commands.init_cmd import init_cmd

    cli.add_command(fetch)
    cli.add_command(init_cmd)
    cli.add_command(check)
    cli.add_command(codecs)
