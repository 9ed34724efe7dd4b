"""Deployment environments: a name plus the values exported to hooks.

Layout:
    .hookrun/
        dev/
            env.yaml      - flat mapping of VARIABLE: value
        prod/
            env.yaml
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

import yaml

from .errors import ProjectConfigError

ENV_NAME_VAR = "HOOKRUN_ENV_NAME"
ENV_DIR = ".hookrun"
ENV_FILE = "env.yaml"

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Environment:
    """Handle forwarded unchanged to every hook invocation."""

    name: str
    values: Mapping[str, str] = field(default_factory=dict)

    def to_process_env(self) -> dict[str, str]:
        """Variables to add on top of the inherited process environment."""
        env = {key: str(value) for key, value in self.values.items()}
        env[ENV_NAME_VAR] = self.name
        return env


def resolve_environment_name(flag_value: Optional[str], default: str) -> str:
    """Pick the environment name: flag, then HOOKRUN_ENV_NAME, then config."""
    return flag_value or os.getenv(ENV_NAME_VAR, "") or default


def load_environment(project_root: Path, name: str) -> Environment:
    """Load .hookrun/<name>/env.yaml under the project root.

    A missing file yields an environment with no values.
    """
    path = Path(project_root) / ENV_DIR / name / ENV_FILE
    if not path.is_file():
        _log.debug("No environment file at %s", path)
        return Environment(name=name)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ProjectConfigError(f"invalid environment file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProjectConfigError(f"environment file {path} must be a mapping")

    values = {str(k): "" if v is None else str(v) for k, v in data.items()}
    return Environment(name=name, values=values)
