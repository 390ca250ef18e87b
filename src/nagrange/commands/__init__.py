"""Subcommand modules for nagrange.

Provides register_commands() which uses deferred imports to keep
``nagrange --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from nagrange.commands.check import check
    from nagrange.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(check)
