"""Rich Console factory and theme for jsonrec output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

JSONREC_THEME = Theme(
    {
        "jr.ok": "bold green",
        "jr.error": "bold red",
        "jr.warning": "bold yellow",
        "jr.op": "bold cyan",
        "jr.key": "dim",
        "jr.path": "dim",
        "jr.valid": "green",
        "jr.invalid": "red",
        "jr.variant.strings": "blue",
        "jr.variant.colors": "magenta",
    }
)

_VARIANT_STYLES: dict[str, str] = {
    "strings": "jr.variant.strings",
    "colors": "jr.variant.colors",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=JSONREC_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_variant(variant: str) -> str:
    """Return the Rich style name for a record variant."""
    return _VARIANT_STYLES.get(variant, "")
