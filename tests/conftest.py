"""Shared fakes for the hook orchestration tests."""

import io
from pathlib import Path
from types import SimpleNamespace

import pytest

from hookrun.environment import Environment
from hookrun.errors import CommandFailedError
from hookrun.hooks import (
    CommandRunner,
    HookInvoker,
    HookOrchestrator,
    ProgressReporter,
    ProjectHookSource,
    ScopeDescriptor,
    ServiceDescriptor,
)


class FakeConsole(ProgressReporter):
    """Records every spinner/previewer call in order."""

    def __init__(self):
        self.events = []
        self.open_previewers = 0

    def show_spinner(self, message):
        self.events.append(("spinner", message))

    def stop_spinner(self, message, status):
        self.events.append(("stop", message, status))

    def show_previewer(self, options):
        assert self.open_previewers == 0, "previewer already open"
        self.open_previewers += 1
        self.events.append(("previewer", options.title))
        return io.StringIO()

    def stop_previewer(self, sink):
        self.open_previewers -= 1
        self.events.append(("stop_previewer",))

    @property
    def statuses(self):
        return [(e[1], e[2]) for e in self.events if e[0] == "stop"]


class FakeRunner(CommandRunner):
    """Records invocations; fails for hooks whose ``run`` is in ``fail_on``."""

    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)

    def run_hooks(self, hooks, hook_type, command_name, cwd, environment, stdout=None, context=None):
        key = f"{hook_type.value}{command_name}"
        (hook,) = hooks[key]
        self.calls.append(SimpleNamespace(
            key=key,
            hook=hook,
            hook_type=hook_type,
            command_name=command_name,
            cwd=cwd,
            environment=environment,
        ))
        if hook.run in self.fail_on:
            raise CommandFailedError(hook.name, f"'{hook.name}' hook failed with exit code: '1'", exit_code=1)
        if stdout is not None:
            stdout.write(f"ran {hook.run}\n")

    @property
    def ran(self):
        return [c.hook.run for c in self.calls]


class FakeSource(ProjectHookSource):
    def __init__(self, hooks=None, services=None, root=Path("/project")):
        self.root = root
        self.hooks = hooks or {}
        self.services = [
            ServiceDescriptor(
                name=name,
                relative_path=f"./src/{name}",
                path=root / "src" / name,
                hooks=table,
            )
            for name, table in (services or {}).items()
        ]

    def project_scope(self):
        return ScopeDescriptor.project(self.root)

    def hooks_for(self, scope):
        if scope.is_service:
            return next(s.hooks for s in self.services if s.name == scope.name)
        return self.hooks

    def service_exists(self, name):
        return any(s.name == name for s in self.services)

    def stable_services(self):
        return list(self.services)


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def environment():
    return Environment(name="dev", values={"REGION": "westus"})


@pytest.fixture
def make_orchestrator(console, environment):
    def _make(source, runner, platform=""):
        invoker = HookInvoker(runner, console, environment)
        return HookOrchestrator(source, invoker, console, platform=platform)
    return _make
