"""Load the project file and expose its hook tables.

Project file convention (hookrun.yaml at the project root):
    name: shop
    hooks:                 - project level hooks
      predeploy:
        run: ./scripts/check.sh
    services:
      web:
        project: ./src/web - service directory, relative to the root
        hooks:
          postpackage:
            - run: npm run build
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ProjectConfigError, ProjectNotFoundError
from .hooks.interfaces import ProjectHookSource
from .hooks.loader import load_hook_table
from .hooks.models import HookTable, ScopeDescriptor, ServiceDescriptor

PROJECT_FILE = "hookrun.yaml"

_log = logging.getLogger(__name__)


class ProjectConfig(ProjectHookSource):
    """Parsed hookrun.yaml, serving as the hook source for a run."""

    def __init__(self, path: Path, name: str, hooks: HookTable, services: dict[str, ServiceDescriptor]):
        self.path = path
        self.name = name
        self.hooks = hooks
        self.services = services

    @classmethod
    def from_dict(cls, root: Path, data: dict[str, Any]) -> "ProjectConfig":
        services: dict[str, ServiceDescriptor] = {}
        raw_services = data.get("services") or {}
        if not isinstance(raw_services, dict):
            raise ProjectConfigError("'services' must be a mapping of service name to service")

        for name, entry in raw_services.items():
            name = str(name)
            if not isinstance(entry, dict):
                raise ProjectConfigError(f"service '{name}' must be a mapping")
            relative = str(entry.get("project", "."))
            services[name] = ServiceDescriptor(
                name=name,
                relative_path=relative,
                path=(root / relative).resolve(),
                hooks=load_hook_table(entry.get("hooks"), scope=name),
            )

        return cls(
            path=root,
            name=str(data.get("name") or root.name),
            hooks=load_hook_table(data.get("hooks")),
            services=services,
        )

    def project_scope(self) -> ScopeDescriptor:
        return ScopeDescriptor.project(self.path)

    def hooks_for(self, scope: ScopeDescriptor) -> HookTable:
        if scope.is_service:
            service = self.services.get(scope.name)
            return service.hooks if service else {}
        return self.hooks

    def service_exists(self, name: str) -> bool:
        return name in self.services

    def stable_services(self) -> list[ServiceDescriptor]:
        """Services sorted by name, independent of file order."""
        return [self.services[name] for name in sorted(self.services)]


def find_project_root(start_dir: Optional[str] = None) -> Optional[Path]:
    """Walk up from start_dir to find the nearest directory with hookrun.yaml."""
    current = Path(start_dir or ".").resolve()
    for _ in range(50):  # safety limit
        if (current / PROJECT_FILE).is_file():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_project(start_dir: Optional[str] = None) -> ProjectConfig:
    """Find and parse hookrun.yaml."""
    root = find_project_root(start_dir)
    if root is None:
        raise ProjectNotFoundError(
            f"no project found: {PROJECT_FILE} is missing in "
            f"{Path(start_dir or '.').resolve()} and its parents"
        )

    path = root / PROJECT_FILE
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ProjectConfigError(f"invalid project file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProjectConfigError(f"project file {path} must be a mapping")

    project = ProjectConfig.from_dict(root, data)
    _log.debug("Loaded project %s with %d service(s)", project.name, len(project.services))
    return project
