"""Subcommand modules for coolstore.

Provides register_commands() which uses deferred imports to keep
``coolstore --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from coolstore.commands.add import add
    from coolstore.commands.shell import shell

    cli.add_command(add)
    cli.add_command(shell)
