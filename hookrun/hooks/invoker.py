"""Run a single resolved hook with its output shown in a previewer."""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from .interfaces import CommandRunner, PreviewerOptions, ProgressReporter
from .models import HookDefinition, HookType

if TYPE_CHECKING:
    from ..environment import Environment
    from .context import RunContext

_log = logging.getLogger(__name__)


class HookInvoker:
    """Execute one hook definition through the command runner."""

    def __init__(
        self,
        runner: CommandRunner,
        console: ProgressReporter,
        environment: "Environment",
        prefix: str = "  ",
        max_lines: int = 8,
    ):
        self._runner = runner
        self._console = console
        self._environment = environment
        self._prefix = prefix
        self._max_lines = max_lines

    def invoke(
        self,
        cwd: Path,
        hook_type: HookType,
        command_name: str,
        hook: HookDefinition,
        title: str = "",
        context: Optional["RunContext"] = None,
    ) -> None:
        """Run ``hook`` in ``cwd``. Runner errors propagate unchanged."""
        key = f"{hook_type.value}{command_name}"
        hooks_map = {key: (hook,)}

        previewer = self._console.show_previewer(PreviewerOptions(
            title=title or f"{key} hook output",
            prefix=self._prefix,
            max_lines=self._max_lines,
        ))
        try:
            _log.debug("Running hook %s in %s", key, cwd)
            self._runner.run_hooks(
                hooks_map,
                hook_type,
                command_name,
                cwd,
                self._environment,
                stdout=previewer,
                context=context,
            )
        finally:
            self._console.stop_previewer(previewer)
