"""Hook catalog data: hook names, definitions and the scopes that own them."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from ..errors import InvalidHookNameError


class HookType(str, Enum):
    """Phase of a lifecycle hook."""

    PRE = "pre"
    POST = "post"


class HookPlatform(str, Enum):
    """Platforms a hook can carry an override for."""

    WINDOWS = "windows"
    POSIX = "posix"


@dataclass(frozen=True)
class HookName:
    """A hook name split into its phase and command, e.g. pre + deploy."""

    hook_type: HookType
    command_name: str

    @property
    def key(self) -> str:
        return f"{self.hook_type.value}{self.command_name}"

    def __str__(self) -> str:
        return self.key


# Longest first so a longer phase is never shadowed by a shorter one.
_KNOWN_PHASES = sorted(HookType, key=lambda t: len(t.value), reverse=True)


def parse_hook_name(name: str) -> HookName:
    """Split a hook name into (phase, command) by its longest known prefix.

    Raises InvalidHookNameError when no phase matches or nothing follows it.
    """
    if not name:
        raise InvalidHookNameError(name, "hook name is empty")

    for phase in _KNOWN_PHASES:
        if name.startswith(phase.value):
            command = name[len(phase.value):]
            if not command:
                raise InvalidHookNameError(name, "missing command name")
            return HookName(hook_type=phase, command_name=command)

    raise InvalidHookNameError(name)


@dataclass(frozen=True)
class HookDefinition:
    """One configured hook command plus its optional platform overrides."""

    run: str
    name: str = ""
    shell: str = ""
    interactive: bool = False
    continue_on_error: bool = False
    windows: Optional["HookDefinition"] = None
    posix: Optional["HookDefinition"] = None

    def variant(self, platform: HookPlatform) -> Optional["HookDefinition"]:
        if platform is HookPlatform.WINDOWS:
            return self.windows
        return self.posix


# hook name -> hooks in authoring order
HookTable = Mapping[str, tuple[HookDefinition, ...]]


@dataclass(frozen=True)
class ScopeDescriptor:
    """Where a hook table lives: the project root or one service."""

    name: str
    path: Path
    is_service: bool = False

    @classmethod
    def project(cls, path: Path) -> "ScopeDescriptor":
        return cls(name="project", path=path)

    @property
    def label(self) -> str:
        return f"service {self.name}" if self.is_service else "project"


@dataclass(frozen=True)
class ServiceDescriptor:
    """A service of the project with its own directory and hook table."""

    name: str
    relative_path: str
    path: Path
    hooks: HookTable = field(default_factory=dict)

    @property
    def scope(self) -> ScopeDescriptor:
        return ScopeDescriptor(name=self.name, path=self.path, is_service=True)
