"""UI components for hookrun."""

from .output import highlight, render_error, render_success, render_title
from .progress import Previewer, RichProgressReporter
from .theme import DEFAULT_PALETTE, console

__all__ = [
    "DEFAULT_PALETTE",
    "Previewer",
    "RichProgressReporter",
    "console",
    "highlight",
    "render_error",
    "render_success",
    "render_title",
]
