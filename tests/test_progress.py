"""Tests for the rich spinner and previewer."""

from io import StringIO

from rich.console import Console

from hookrun.hooks import PreviewerOptions, StepStatus
from hookrun.ui.progress import Previewer, RichProgressReporter


def _console():
    buf = StringIO()
    return Console(file=buf, force_terminal=False, width=100), buf


class TestPreviewer:
    def test_keeps_last_lines(self):
        console, _ = _console()
        previewer = Previewer(console, PreviewerOptions(title="out", max_lines=3))
        previewer.start()
        for i in range(10):
            previewer.write(f"line {i}\n")
        previewer.stop()
        assert previewer.lines == ["line 7", "line 8", "line 9"]

    def test_partial_writes(self):
        console, _ = _console()
        previewer = Previewer(console, PreviewerOptions(title="out"))
        previewer.start()
        previewer.write("hel")
        previewer.write("lo\r\nwor")
        assert previewer.lines == ["hello"]
        previewer.stop()
        assert previewer.lines == ["hello", "wor"]

    def test_write_returns_length(self):
        console, _ = _console()
        previewer = Previewer(console, PreviewerOptions(title="out"))
        assert previewer.write("abc\n") == 4
        previewer.flush()


class TestRichProgressReporter:
    def test_stop_spinner_prints_status(self):
        console, buf = _console()
        reporter = RichProgressReporter(console)
        reporter.show_spinner("Running 1 predeploy command hook(s) for project")
        reporter.stop_spinner("Running 1 predeploy command hook(s) for project", StepStatus.DONE)

        output = buf.getvalue()
        assert "Done:" in output
        assert "for project" in output

    def test_all_statuses(self):
        console, buf = _console()
        reporter = RichProgressReporter(console)
        for status, label in [
            (StepStatus.FAILED, "Failed:"),
            (StepStatus.SKIPPED, "Skipped:"),
            (StepStatus.WARNING, "Warning:"),
        ]:
            reporter.stop_spinner("msg", status)
            assert label in buf.getvalue()

    def test_previewer_replaces_spinner(self):
        console, _ = _console()
        reporter = RichProgressReporter(console)
        reporter.show_spinner("working")
        sink = reporter.show_previewer(PreviewerOptions(title="web: predeploy hook output"))
        sink.write("hello\n")
        reporter.stop_previewer(sink)
        reporter.stop_spinner("working", StepStatus.DONE)
        assert sink.lines == ["hello"]
