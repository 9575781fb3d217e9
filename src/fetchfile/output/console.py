"""Rich Console factory and theme for fetchfile output.

Consoles render to a StringIO buffer so renderers keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FETCH_THEME = Theme(
    {
        "ff.ok": "bold green",
        "ff.error": "bold red",
        "ff.op": "bold cyan",
        "ff.key": "dim",
        "ff.path": "dim",
        "ff.codec": "magenta",
        "ff.state.valid": "green",
        "ff.state.absent": "yellow",
        "ff.state.corrupt": "bold red",
        "ff.default": "yellow",
        "ff.loaded": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FETCH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_state(state: str) -> str:
    """Return the Rich style name for a check state."""
    return f"ff.state.{state}" if state in ("valid", "absent", "corrupt") else ""
