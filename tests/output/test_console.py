"""Tests for the StringIO-backed Rich console factory."""

from rich.text import Text

from storefront.output.console import STORE_THEME, create_console, get_output, style_for_field


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_no_ansi_when_not_a_tty(self) -> None:
        console = create_console()
        console.print(Text("OK", style="store.ok"))
        assert "\x1b[" not in get_output(console)

    def test_width_override(self) -> None:
        assert create_console(width=40).width == 40
        assert create_console().width == 100

    def test_theme_styles_defined(self) -> None:
        for name in ("store.ok", "store.error", "store.money", "store.online"):
            assert name in STORE_THEME.styles


class TestStyleForField:
    def test_money_fields(self) -> None:
        assert style_for_field("converted") == "store.money"
        assert style_for_field("cost") == "store.money"

    def test_unknown_field_unstyled(self) -> None:
        assert style_for_field("email") == ""
