"""Configuration management for hookrun."""

import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

_log = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "defaults": {
        "environment": "dev",
    },
    "previewer": {
        "prefix": "  ",
        "max_lines": 8,
    },
    "hooks": {
        "timeout": 0,
        "posix_shell": "sh",
        "windows_shell": "pwsh",
    },
    "logging": {
        "level": "WARNING",
    },
}


class ConfigManager:
    """Manage hookrun configuration from YAML."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or "~/.config/hookrun/config.yaml").expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            self._create_default_config()

        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            with open(self.config_path, "r") as f:
                content = yaml.safe_load(f)
                return content if isinstance(content, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            _log.warning("Error reading config %s: %s", self.config_path, e)
            return {}

    def _create_default_config(self) -> None:
        """Create default configuration file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False)
        except OSError as e:
            _log.warning("Could not write default config %s: %s", self.config_path, e)

    def _section(self, name: str) -> Dict[str, Any]:
        defaults = DEFAULT_CONFIG[name]
        config = self.data.get(name) or {}
        return {**defaults, **config} if isinstance(config, dict) else dict(defaults)

    def _resolve_env_var(self, value: Any) -> Any:
        """Resolve environment variable references like ${VAR_NAME}."""
        if not isinstance(value, str):
            return value
        if not value.startswith("${") or not value.endswith("}"):
            return value

        var_name = value[2:-1]
        return os.getenv(var_name, "")

    def _number(self, section: str, key: str, value: Any, cast) -> Any:
        """Cast a numeric setting, falling back to the default when it is malformed."""
        try:
            return cast(self._resolve_env_var(value) or 0)
        except (TypeError, ValueError):
            default = DEFAULT_CONFIG[section][key]
            _log.warning("Invalid %s.%s %r in %s, using %r", section, key, value, self.config_path, default)
            return cast(default)

    def get_default_environment(self) -> str:
        """Environment used when neither --environment nor HOOKRUN_ENV_NAME is set."""
        return str(self._resolve_env_var(self._section("defaults")["environment"]))

    def set_default_environment(self, name: str) -> None:
        """Persist ``name`` as the default environment."""
        defaults = self.data.get("defaults")
        if not isinstance(defaults, dict):
            defaults = self.data["defaults"] = {}
        defaults["environment"] = name
        self.save()

    def get_previewer_config(self) -> Dict[str, Any]:
        """Get previewer layout (prefix, max_lines)."""
        section = self._section("previewer")
        return {
            "prefix": str(section["prefix"]),
            "max_lines": max(1, self._number("previewer", "max_lines", section["max_lines"], int)),
        }

    def get_hooks_config(self) -> Dict[str, Any]:
        """Get hook execution settings (timeout, shells)."""
        section = self._section("hooks")
        timeout = self._number("hooks", "timeout", section["timeout"], float)
        return {
            "timeout": max(0.0, timeout),
            "posix_shell": str(section["posix_shell"]),
            "windows_shell": str(section["windows_shell"]),
        }

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging settings."""
        level = str(self._section("logging")["level"]).upper()
        if not isinstance(logging.getLevelName(level), int):
            default = DEFAULT_CONFIG["logging"]["level"]
            _log.warning("Invalid logging.level %r in %s, using %r", level, self.config_path, default)
            level = default
        return {"level": level}

    def save(self) -> None:
        """Save configuration to file."""
        with open(self.config_path, "w") as f:
            yaml.dump(self.data, f, default_flow_style=False)
