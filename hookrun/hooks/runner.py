"""Subprocess-backed command runner for hook scripts.

Executes a hook's ``run`` value either as a script file or as an inline
script, with the deployment environment exported on top of the current
process environment. Output is streamed line by line to the sink.
"""

import logging
import os
import signal
import subprocess
import sys
import threading
import time
from pathlib import Path
from typing import Mapping, Optional, TextIO, TYPE_CHECKING

from ..errors import CommandFailedError
from .interfaces import CommandRunner
from .models import HookDefinition, HookType

if TYPE_CHECKING:
    from ..environment import Environment
    from .context import RunContext

_log = logging.getLogger(__name__)

_SHELL_BY_EXTENSION = {
    ".sh": "sh",
    ".ps1": "pwsh",
}

_POLL_INTERVAL = 0.1


def _terminate(proc: subprocess.Popen) -> None:
    """Kill the hook and anything it spawned."""
    if sys.platform != "win32":
        try:
            os.killpg(proc.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass
    else:
        proc.kill()
    proc.wait()


def infer_shell(hook: HookDefinition, default: str) -> str:
    """Shell to use: explicit ``shell``, else script extension, else ``default``."""
    if hook.shell:
        return hook.shell
    return _SHELL_BY_EXTENSION.get(Path((hook.run.split() or [""])[0]).suffix.lower(), default)


def build_command(hook: HookDefinition, shell: str, cwd: Path) -> list[str]:
    """argv for running ``hook`` with ``shell`` from ``cwd``."""
    script = hook.run.strip()
    is_file = (cwd / script).is_file()

    if shell in ("pwsh", "powershell"):
        if is_file:
            return [shell, "-NoProfile", "-File", script]
        return [shell, "-NoProfile", "-Command", script]

    if is_file:
        return [shell, script]
    return [shell, "-c", script]


class SubprocessCommandRunner(CommandRunner):
    """Run hooks as child processes, one at a time."""

    def __init__(self, posix_shell: str = "sh", windows_shell: str = "pwsh"):
        self._posix_shell = posix_shell
        self._windows_shell = windows_shell

    @property
    def default_shell(self) -> str:
        return self._windows_shell if sys.platform == "win32" else self._posix_shell

    def run_hooks(
        self,
        hooks: Mapping[str, tuple[HookDefinition, ...]],
        hook_type: HookType,
        command_name: str,
        cwd: Path,
        environment: "Environment",
        stdout: Optional[TextIO] = None,
        context: Optional["RunContext"] = None,
    ) -> None:
        key = f"{hook_type.value}{command_name}"
        matching = hooks.get(key, ())
        if not matching:
            _log.debug("No %s hook registered", key)
            return

        env = dict(os.environ)
        env.update(environment.to_process_env())

        for hook in matching:
            self._run_single(hook, Path(cwd), env, stdout, context)

    def _run_single(
        self,
        hook: HookDefinition,
        cwd: Path,
        env: dict,
        stdout: Optional[TextIO],
        context: Optional["RunContext"],
    ) -> None:
        """Execute a single hook command, raising on failure."""
        if context is not None:
            context.check()

        if not hook.run.strip():
            raise CommandFailedError(hook.name, f"'{hook.name}' hook has no script to run")

        shell = infer_shell(hook, self.default_shell)
        argv = build_command(hook, shell, cwd)
        _log.info("Executing hook %s: %s", hook.name, " ".join(argv))

        start = time.monotonic()
        try:
            proc = subprocess.Popen(
                argv,
                cwd=str(cwd),
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                text=True,
                bufsize=1,
                start_new_session=sys.platform != "win32",
            )
        except OSError as e:
            raise CommandFailedError(
                hook.name, f"'{hook.name}' hook failed to start: {e}",
            ) from e

        pump = threading.Thread(target=self._pump, args=(proc, stdout), daemon=True)
        pump.start()

        try:
            return_code = self._wait(proc, context)
        finally:
            pump.join()

        duration = round(time.monotonic() - start, 3)
        _log.debug("Hook %s exited with %d after %ss", hook.name, return_code, duration)

        if return_code == 0:
            return

        message = f"'{hook.name}' hook failed with exit code: '{return_code}'"
        if hook.continue_on_error:
            _log.warning("%s. Execution will continue since continueOnError is set", message)
            return
        raise CommandFailedError(hook.name, message, exit_code=return_code)

    @staticmethod
    def _pump(proc: subprocess.Popen, sink: Optional[TextIO]) -> None:
        # Keep draining after a sink failure so the child never blocks on a full pipe.
        for line in proc.stdout:
            if sink is None:
                continue
            try:
                sink.write(line)
            except Exception as e:
                _log.warning("Hook output can no longer be displayed: %s", e)
                sink = None
        proc.stdout.close()

    @staticmethod
    def _wait(proc: subprocess.Popen, context: Optional["RunContext"]) -> int:
        while True:
            try:
                return proc.wait(timeout=_POLL_INTERVAL)
            except subprocess.TimeoutExpired:
                if context is not None and context.cancelled:
                    _terminate(proc)
                    context.check()
            except KeyboardInterrupt:
                _terminate(proc)
                raise
