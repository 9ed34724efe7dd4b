"""Rich-backed spinner and live output previewer.

Only one live display can be active on a rich console, so opening a
previewer stops whatever spinner is showing. The orchestrator reports the
step status itself once the hook finishes.
"""

import threading
from collections import deque
from typing import Optional

from rich.console import Console, Group
from rich.live import Live
from rich.status import Status
from rich.text import Text

from ..hooks.interfaces import PreviewerOptions, ProgressReporter, StepStatus
from .theme import DEFAULT_PALETTE, ColorPalette

_STATUS_LABELS = {
    StepStatus.DONE: ("(✓) Done:", "done"),
    StepStatus.FAILED: ("(x) Failed:", "error"),
    StepStatus.SKIPPED: ("(-) Skipped:", "text_dim"),
    StepStatus.WARNING: ("(!) Warning:", "warning"),
}


class Previewer:
    """Bounded window over the last ``max_lines`` lines of hook output.

    Behaves like a writable text stream so it can be handed to the command
    runner as stdout.
    """

    def __init__(self, console: Console, options: PreviewerOptions, palette: ColorPalette = DEFAULT_PALETTE):
        self._options = options
        self._palette = palette
        self._lines: deque[str] = deque(maxlen=options.max_lines)
        self._partial = ""
        self._lock = threading.Lock()
        self._live = Live(self._render(), console=console, refresh_per_second=10, transient=True)

    @property
    def lines(self) -> list[str]:
        with self._lock:
            return list(self._lines)

    def start(self) -> None:
        self._live.start()

    def stop(self) -> None:
        with self._lock:
            if self._partial:
                self._lines.append(self._partial)
                self._partial = ""
        self._live.stop()

    def write(self, data: str) -> int:
        with self._lock:
            text = self._partial + data
            *complete, self._partial = text.split("\n")
            self._lines.extend(line.rstrip("\r") for line in complete)
            renderable = self._render()
        self._live.update(renderable)
        return len(data)

    def flush(self) -> None:
        pass

    def _render(self) -> Group:
        title = Text(self._options.title, style=f"bold {self._palette.title}")
        body = [
            Text(f"{self._options.prefix}{line}", style=f"dim {self._palette.text}")
            for line in self._lines
        ]
        return Group(title, *body)


class RichProgressReporter(ProgressReporter):
    """ProgressReporter drawing on a rich console."""

    def __init__(self, console: Console, palette: ColorPalette = DEFAULT_PALETTE):
        self._console = console
        self._palette = palette
        self._status: Optional[Status] = None

    def show_spinner(self, message: str) -> None:
        self._clear_spinner()
        self._status = self._console.status(
            Text(message, style=self._palette.text),
            spinner="dots",
            spinner_style=self._palette.spinner,
        )
        self._status.start()

    def stop_spinner(self, message: str, status: StepStatus) -> None:
        self._clear_spinner()
        label, color = _STATUS_LABELS[status]
        line = Text("  ")
        line.append(label, style=f"bold {getattr(self._palette, color)}")
        line.append(f" {message}", style=self._palette.text)
        self._console.print(line, soft_wrap=True)

    def show_previewer(self, options: PreviewerOptions) -> Previewer:
        self._clear_spinner()
        previewer = Previewer(self._console, options, self._palette)
        previewer.start()
        return previewer

    def stop_previewer(self, sink: Previewer) -> None:
        sink.stop()

    def _clear_spinner(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
