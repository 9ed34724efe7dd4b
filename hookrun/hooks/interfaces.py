"""Capabilities the hook orchestrator is composed from.

The orchestrator only talks to these abstract interfaces. Concrete
implementations live in ``hookrun.project`` (hook source),
``hookrun.hooks.runner`` (process execution) and ``hookrun.ui.progress``
(console).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, TextIO, TYPE_CHECKING

from .models import HookDefinition, HookTable, HookType, ScopeDescriptor, ServiceDescriptor

if TYPE_CHECKING:
    from ..environment import Environment
    from .context import RunContext


class StepStatus(str, Enum):
    """Final state shown when a spinner stops."""

    DONE = "done"
    FAILED = "failed"
    SKIPPED = "skipped"
    WARNING = "warning"


@dataclass(frozen=True)
class PreviewerOptions:
    """Layout of the live output window for one hook."""

    title: str
    prefix: str = "  "
    max_lines: int = 8


class ProjectHookSource(ABC):
    """Read-only view of the project's hook tables."""

    @abstractmethod
    def project_scope(self) -> ScopeDescriptor:
        """Scope for the project root."""

    @abstractmethod
    def hooks_for(self, scope: ScopeDescriptor) -> HookTable:
        """Hook table owned by ``scope``."""

    @abstractmethod
    def service_exists(self, name: str) -> bool:
        """True if the project defines a service called ``name``."""

    @abstractmethod
    def stable_services(self) -> list[ServiceDescriptor]:
        """Services in the order their hooks must run."""


class CommandRunner(ABC):
    """Runs the hook registered under ``hook_type + command_name``."""

    @abstractmethod
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
        """Run the matching hooks, raising on spawn failure or non-zero exit."""


class ProgressReporter(ABC):
    """Spinner and output previewer surface."""

    @abstractmethod
    def show_spinner(self, message: str) -> None:
        ...

    @abstractmethod
    def stop_spinner(self, message: str, status: StepStatus) -> None:
        ...

    @abstractmethod
    def show_previewer(self, options: PreviewerOptions) -> TextIO:
        """Open a previewer and return a writable sink for hook output."""

    @abstractmethod
    def stop_previewer(self, sink: TextIO) -> None:
        ...
