"""Title, result and error lines for the hooks command."""

from rich.markup import escape
from rich.text import Text

from .theme import DEFAULT_PALETTE, console, err_console


def render_title(title: str, note: str = "") -> None:
    """Render the command title with an optional dim note beneath it."""
    palette = DEFAULT_PALETTE
    console.print()
    console.print(Text(title, style=f"bold {palette.text_bright}"))
    if note:
        console.print(Text.from_markup(note, style=f"dim {palette.text}"))
    console.print()


def highlight(value: str) -> str:
    """Markup for a highlighted value inside a note."""
    return f"[{DEFAULT_PALETTE.highlight}]{escape(value)}[/]"


def render_success(header: str) -> None:
    palette = DEFAULT_PALETTE
    console.print()
    console.print(Text(f"SUCCESS: {header}", style=f"bold {palette.done}"))


def render_error(text: str) -> None:
    """Render an error message."""
    palette = DEFAULT_PALETTE
    err = Text()
    err.append("ERROR: ", style=f"bold {palette.error}")
    err.append(text, style=palette.error)
    err_console.print(err, soft_wrap=True)
