"""Find and execute the hooks registered for a lifecycle event.

The project scope always runs first, then each service in the order the
hook source returns them. Hooks inside a scope run one at a time in
authoring order, and the first failure aborts the whole run.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from ..errors import HookExecutionError, InvalidHookNameError, UnknownServiceError
from .context import RunContext
from .interfaces import ProgressReporter, ProjectHookSource, StepStatus
from .invoker import HookInvoker
from .models import (
    HookDefinition,
    HookName,
    ScopeDescriptor,
    ServiceDescriptor,
    parse_hook_name,
)
from .platform import resolve_platform

NO_HOOK_FOUND = " (No hook found)"

_log = logging.getLogger(__name__)


class ScopeStatus(str, Enum):
    """Outcome of one scope within a run."""

    DONE = "done"
    EMPTY = "empty"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ScopeResult:
    scope: str
    status: ScopeStatus
    hooks_run: int = 0


@dataclass(frozen=True)
class RunResult:
    """Summary of a successful run."""

    hook_name: str
    scopes: tuple[ScopeResult, ...] = ()
    message: str = "Your hooks have been run successfully"

    @property
    def hooks_run(self) -> int:
        return sum(s.hooks_run for s in self.scopes)


class HookOrchestrator:
    """Walk the project and service scopes for one hook name."""

    def __init__(
        self,
        source: ProjectHookSource,
        invoker: HookInvoker,
        console: ProgressReporter,
        platform: str = "",
    ):
        self._source = source
        self._invoker = invoker
        self._console = console
        self._platform = platform

    def run(
        self,
        hook_name: str,
        service_filter: str = "",
        context: Optional[RunContext] = None,
    ) -> RunResult:
        """Run every hook registered for ``hook_name``.

        Args:
            hook_name: Lifecycle event, e.g. ``predeploy``.
            service_filter: Only run service hooks for this service. Other
                services are reported as skipped. Project hooks always run.
            context: Cancellation handle threaded through every invocation.

        Raises:
            InvalidHookNameError: empty name or no pre/post phase.
            UnknownServiceError: ``service_filter`` names no known service.
            PlatformError: the forced platform is invalid, or a hook has no
                override for the platform it would run on.
            HookExecutionError: a hook failed; nothing after it was run.
        """
        if not hook_name:
            raise InvalidHookNameError(hook_name, "hook name is empty")

        if service_filter and not self._source.service_exists(service_filter):
            raise UnknownServiceError(service_filter)

        parsed = parse_hook_name(hook_name)
        context = context or RunContext()
        results = []

        project = self._source.project_scope()
        project_hooks = self._source.hooks_for(project).get(hook_name, ())
        services = self._source.stable_services()
        self._check_platform(hook_name, project_hooks, services, service_filter)

        results.append(self._process_scope(
            project,
            parsed,
            project_hooks,
            spinner_message=(
                f"Running {len(project_hooks)} {hook_name} command hook(s) for project"
            ),
            preview_title=f"Project: {hook_name} Hook Output",
            skip=False,
            context=context,
        ))

        for service in services:
            service_hooks = service.hooks.get(hook_name, ())
            skip = bool(service_filter) and service.name != service_filter
            results.append(self._process_scope(
                service.scope,
                parsed,
                service_hooks,
                spinner_message=(
                    f"Running {len(service_hooks)} {hook_name} service hook(s) "
                    f"for {service.name}"
                ),
                preview_title=f"{service.name}: {hook_name} hook output",
                skip=skip,
                context=context,
            ))

        return RunResult(hook_name=hook_name, scopes=tuple(results))

    def _check_platform(
        self,
        hook_name: str,
        project_hooks: Sequence[HookDefinition],
        services: Sequence[ServiceDescriptor],
        service_filter: str,
    ) -> None:
        """Resolve every hook that will run so platform errors surface before any of them starts."""
        pending = list(project_hooks)
        for service in services:
            if not service_filter or service.name == service_filter:
                pending.extend(service.hooks.get(hook_name, ()))
        for hook in pending:
            resolve_platform(self._platform, hook, hook_name)

    def _process_scope(
        self,
        scope: ScopeDescriptor,
        hook_name: HookName,
        hooks: Sequence[HookDefinition],
        spinner_message: str,
        preview_title: str,
        skip: bool,
        context: RunContext,
    ) -> ScopeResult:
        self._console.show_spinner(spinner_message)

        if skip:
            self._console.stop_spinner(spinner_message, StepStatus.SKIPPED)
            return ScopeResult(scope.name, ScopeStatus.SKIPPED)

        if not hooks:
            self._console.stop_spinner(spinner_message + NO_HOOK_FOUND, StepStatus.WARNING)
            return ScopeResult(scope.name, ScopeStatus.EMPTY)

        name = hook_name.key
        for count, hook in enumerate(hooks, start=1):
            resolved = resolve_platform(self._platform, hook, name)
            try:
                context.check()
                self._invoker.invoke(
                    scope.path,
                    hook_name.hook_type,
                    hook_name.command_name,
                    resolved,
                    title=preview_title,
                    context=context,
                )
            except Exception as e:
                _log.debug("Hook %s failed for %s: %s", name, scope.label, e)
                self._console.stop_spinner(spinner_message, StepStatus.FAILED)
                raise HookExecutionError(name, scope.label, e) from e

            # The previewer replaces the spinner, so report each hook as it finishes.
            self._console.stop_spinner(spinner_message, StepStatus.DONE)

        return ScopeResult(scope.name, ScopeStatus.DONE, hooks_run=count)
