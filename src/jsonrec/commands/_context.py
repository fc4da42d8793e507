"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns input reading and centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
import structlog

from jsonrec.domain.errors import ConfigurationError
from jsonrec.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from jsonrec.config.settings import JsonrecSettings
    from jsonrec.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: JsonrecSettings) -> None:
        self.settings = settings

        from jsonrec.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from jsonrec.services.telemetry import enable_telemetry

            enable_telemetry()

    def read_document(self, path: str) -> str:
        """Read the input document as UTF-8 text.

        Raises:
            click.ClickException: The file cannot be read or decoded.
        """
        try:
            text = _read_utf8(Path(path))
        except ConfigurationError as exc:
            raise click.ClickException(str(exc)) from exc
        logger.debug("input.read", path=path, length=len(text))
        return text

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=self.settings.output.color,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)


def _read_utf8(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"{path} is not valid UTF-8: {exc.reason}"
        raise ConfigurationError(msg) from exc
    except OSError as exc:
        msg = f"Cannot read {path}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc
