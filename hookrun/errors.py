"""Error types raised while resolving and running hooks."""

from typing import Optional


class HookError(Exception):
    """Base class for all hookrun errors."""


class ProjectNotFoundError(HookError):
    """No hookrun.yaml was found walking up from the start directory."""


class ProjectConfigError(HookError):
    """The project file exists but a hook or service entry is malformed."""


class UnknownServiceError(HookError):
    """The --service filter names a service the project does not define."""

    def __init__(self, service: str):
        super().__init__(f"service name '{service}' doesn't exist")
        self.service = service


class InvalidHookNameError(HookError):
    """The hook name has no recognized pre/post phase or no command name."""

    def __init__(self, hook_name: str, reason: str = "unrecognized phase"):
        super().__init__(
            f"invalid hook name '{hook_name}': {reason}. "
            "Hook names start with 'pre' or 'post' followed by a command name"
        )
        self.hook_name = hook_name


class PlatformError(HookError):
    """Base class for --platform failures."""


class InvalidPlatformError(PlatformError):
    def __init__(self, platform: str):
        super().__init__(
            f"platform {platform} is not valid. Supported values are windows & posix"
        )
        self.platform = platform


class PlatformNotConfiguredError(PlatformError):
    def __init__(self, platform: str, hook_name: str = ""):
        label = {"windows": "Windows", "posix": "Posix"}.get(platform, platform)
        msg = f"hook is not configured for {label}"
        if hook_name:
            msg = f"hook '{hook_name}' is not configured for {label}"
        super().__init__(msg)
        self.platform = platform
        self.hook_name = hook_name


class ContextCancelledError(HookError):
    """The run was cancelled or its deadline passed."""

    def __init__(self, reason: str = "context cancelled"):
        super().__init__(reason)


class CommandFailedError(HookError):
    """A hook command could not be spawned or exited non-zero."""

    def __init__(self, hook_name: str, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        self.hook_name = hook_name
        self.exit_code = exit_code


class HookExecutionError(HookError):
    """Wraps the failure of one hook invocation inside a scope."""

    def __init__(self, hook_name: str, scope: str, cause: Exception):
        super().__init__(f"failed running hook {hook_name} for {scope}, {cause}")
        self.hook_name = hook_name
        self.scope = scope
        self.cause = cause

    @property
    def cancelled(self) -> bool:
        return isinstance(self.cause, ContextCancelledError)
