"""Subcommand modules for cakecollate.

Provides register_commands() which uses deferred imports to keep
``cakecollate --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from cakecollate.commands.parse import parse

    cli.add_command(parse)
