"""Command: decode and validate a record document."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonrec.commands._base import DOCUMENT_PATH, VARIANT_CHOICE, JsonrecCommand

if TYPE_CHECKING:
    from jsonrec.commands._context import AppContext


@click.command(
    cls=JsonrecCommand,
    examples="""\
  jsonrec validate colors palette.json
  jsonrec validate strings labels.json --strict-schema
  jsonrec --json validate colors palette.json
  jsonrec -v validate strings labels.json""",
)
@click.argument("variant", type=VARIANT_CHOICE)
@click.argument("path", type=DOCUMENT_PATH)
@click.option(
    "--strict-schema/--advisory-schema",
    "strict_schema",
    default=None,
    help="Let schema violations fail validation (default from [checks] schema_gating).",
)
@click.pass_obj
def validate(app: AppContext, variant: str, path: str, strict_schema: bool | None) -> None:
    """Validate the records in PATH as VARIANT (strings or colors)."""
    from jsonrec.services.validation import ValidationService

    raw_text = app.read_document(path)
    svc = ValidationService(app.settings)
    app.emit(svc.validate(raw_text, variant, schema_gating=strict_schema))
