"""hookrun - run project and service lifecycle hooks."""

__version__ = "0.1.0"

from .cli import cli
from .config import ConfigManager
from .hooks import HookOrchestrator, RunResult
from .project import ProjectConfig, load_project

__all__ = [
    "cli",
    "ConfigManager",
    "HookOrchestrator",
    "ProjectConfig",
    "RunResult",
    "load_project",
]
