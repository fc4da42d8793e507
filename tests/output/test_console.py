"""Tests for Rich Console factory and theme."""

from io import StringIO

from jsonrec.output.console import JSONREC_THEME, create_console, get_output, style_for_variant


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[jr.error]hello[/jr.error]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80


class TestStyleForVariant:
    def test_known_variants(self) -> None:
        assert style_for_variant("strings") == "jr.variant.strings"
        assert style_for_variant("colors") == "jr.variant.colors"

    def test_unknown_variant(self) -> None:
        assert style_for_variant("numbers") == ""

    def test_styles_exist_in_theme(self) -> None:
        for name in ("jr.variant.strings", "jr.variant.colors", "jr.ok", "jr.error"):
            assert name in JSONREC_THEME.styles
