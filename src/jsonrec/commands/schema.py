"""Command: print the structural schemas of a variant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonrec.commands._base import VARIANT_CHOICE, JsonrecCommand

if TYPE_CHECKING:
    from jsonrec.commands._context import AppContext


@click.command(
    cls=JsonrecCommand,
    examples="""\
  jsonrec schema colors
  jsonrec --json schema strings""",
)
@click.argument("variant", type=VARIANT_CHOICE)
@click.pass_obj
def schema(app: AppContext, variant: str) -> None:
    """Show the document and records schemas for VARIANT."""
    from jsonrec.services.validation import ValidationService

    app.emit(ValidationService(app.settings).schema(variant))
