"""Command: decode a record document without validating it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonrec.commands._base import DOCUMENT_PATH, VARIANT_CHOICE, JsonrecCommand

if TYPE_CHECKING:
    from jsonrec.commands._context import AppContext


@click.command(
    cls=JsonrecCommand,
    examples="""\
  jsonrec decode colors palette.json
  jsonrec --json decode strings labels.json""",
)
@click.argument("variant", type=VARIANT_CHOICE)
@click.argument("path", type=DOCUMENT_PATH)
@click.pass_obj
def decode(app: AppContext, variant: str, path: str) -> None:
    """Decode PATH as VARIANT records and print them."""
    from jsonrec.services.validation import ValidationService

    raw_text = app.read_document(path)
    app.emit(ValidationService(app.settings).decode(raw_text, variant))
