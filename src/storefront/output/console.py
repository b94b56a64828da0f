"""Rich Console factory and theme for storefront output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STORE_THEME = Theme(
    {
        "store.ok": "bold green",
        "store.error": "bold red",
        "store.warning": "bold yellow",
        "store.op": "bold cyan",
        "store.key": "dim",
        "store.money": "bold magenta",
        "store.online": "green",
        "store.offline": "red",
    }
)

_FIELD_STYLES: dict[str, str] = {
    "price": "store.money",
    "converted": "store.money",
    "discounted": "store.money",
    "cost": "store.money",
    "discount": "store.money",
    "code": "store.op",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=STORE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_field(key: str) -> str:
    """Return the Rich style name for a payload field."""
    return _FIELD_STYLES.get(key, "")
