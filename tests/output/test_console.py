"""Tests for Rich Console factory and theme."""

from io import StringIO

from rich.text import Text

from issuelink.output.console import ISSUELINK_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print(Text("#42", style="il.issue"))
        output = get_output(console)
        assert "\x1b" not in output
        assert "#42" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestGetOutput:
    def test_extracts_printed_text(self) -> None:
        console = create_console(no_color=True)
        console.print("https://github.com/acme/widgets/issues/1")
        assert "https://github.com/acme/widgets/issues/1" in get_output(console)

    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""


class TestTheme:
    def test_styles_defined(self) -> None:
        for name in ("il.ok", "il.error", "il.issue", "il.url", "il.pattern"):
            assert name in ISSUELINK_THEME.styles
