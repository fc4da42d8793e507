"""Subcommand modules for jsonrec.

Provides register_commands() which uses deferred imports so that
``jsonrec --help`` never loads the validation stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from jsonrec.commands.decode import decode
    from jsonrec.commands.schema import schema
    from jsonrec.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(decode)
    cli.add_command(schema)
