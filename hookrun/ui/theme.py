"""hookrun theme: palette and the shared console."""

from dataclasses import dataclass

from rich.console import Console


@dataclass(frozen=True)
class ColorPalette:
    """Core UI color palette."""

    text_bright: str = "#e8e8f0"
    text: str = "#b8b8cc"
    text_dim: str = "#4a4a60"
    highlight: str = "#00d4e5"
    title: str = "#b44dff"
    done: str = "#34d399"
    warning: str = "#e5c747"
    error: str = "#e55a6e"
    spinner: str = "#e5c747"


DEFAULT_PALETTE = ColorPalette()

console = Console()
err_console = Console(stderr=True)
