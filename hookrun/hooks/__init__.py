"""Lifecycle hook resolution and sequencing for hookrun."""

from .context import RunContext
from .interfaces import (
    CommandRunner,
    PreviewerOptions,
    ProgressReporter,
    ProjectHookSource,
    StepStatus,
)
from .invoker import HookInvoker
from .loader import load_hook_table
from .models import (
    HookDefinition,
    HookName,
    HookPlatform,
    HookTable,
    HookType,
    ScopeDescriptor,
    ServiceDescriptor,
    parse_hook_name,
)
from .orchestrator import HookOrchestrator, RunResult, ScopeResult, ScopeStatus
from .platform import host_platform, resolve_platform
from .runner import SubprocessCommandRunner

__all__ = [
    "CommandRunner",
    "HookDefinition",
    "HookInvoker",
    "HookName",
    "HookOrchestrator",
    "HookPlatform",
    "HookTable",
    "HookType",
    "PreviewerOptions",
    "ProgressReporter",
    "ProjectHookSource",
    "RunContext",
    "RunResult",
    "ScopeDescriptor",
    "ScopeResult",
    "ScopeStatus",
    "ServiceDescriptor",
    "StepStatus",
    "SubprocessCommandRunner",
    "load_hook_table",
    "parse_hook_name",
    "host_platform",
    "resolve_platform",
]
