"""Tests for configuration system."""

import tempfile
from pathlib import Path

import yaml

from hookrun.config import ConfigManager


def test_config_creation():
    """Test config file creation."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "config.yaml"
        manager = ConfigManager(str(config_path))

        assert config_path.exists()
        assert "previewer" in manager.data


def test_defaults():
    """Test default values."""
    with tempfile.TemporaryDirectory() as tmpdir:
        manager = ConfigManager(str(Path(tmpdir) / "config.yaml"))

        assert manager.get_default_environment() == "dev"
        assert manager.get_previewer_config() == {"prefix": "  ", "max_lines": 8}
        assert manager.get_hooks_config() == {
            "timeout": 0.0,
            "posix_shell": "sh",
            "windows_shell": "pwsh",
        }
        assert manager.get_logging_config() == {"level": "WARNING"}


def test_partial_section_merges_defaults(tmp_path):
    """Keys missing from a section fall back to defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"previewer": {"max_lines": 3}, "hooks": {"timeout": 90}}))
    manager = ConfigManager(str(config_path))

    assert manager.get_previewer_config() == {"prefix": "  ", "max_lines": 3}
    assert manager.get_hooks_config()["timeout"] == 90.0
    assert manager.get_hooks_config()["posix_shell"] == "sh"


def test_env_var_resolution(tmp_path, monkeypatch):
    """Test environment variable resolution."""
    monkeypatch.setenv("HOOKRUN_TEST_ENV", "staging")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"defaults": {"environment": "${HOOKRUN_TEST_ENV}"}}))
    manager = ConfigManager(str(config_path))

    assert manager.get_default_environment() == "staging"


def test_non_env_var_passthrough(tmp_path):
    """Test that non-env-var values pass through."""
    manager = ConfigManager(str(tmp_path / "config.yaml"))
    assert manager._resolve_env_var("plain_value") == "plain_value"
    assert manager._resolve_env_var(5) == 5


def test_invalid_yaml_uses_defaults(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("previewer: [unclosed\n")
    manager = ConfigManager(str(config_path))

    assert manager.data == {}
    assert manager.get_previewer_config()["max_lines"] == 8


def test_max_lines_at_least_one(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"previewer": {"max_lines": 0}}))
    assert ConfigManager(str(config_path)).get_previewer_config()["max_lines"] == 1


def test_save_roundtrip(tmp_path):
    config_path = tmp_path / "config.yaml"
    manager = ConfigManager(str(config_path))
    manager.data["defaults"]["environment"] = "prod"
    manager.save()

    assert ConfigManager(str(config_path)).get_default_environment() == "prod"


def test_malformed_numbers_fall_back_to_defaults(tmp_path, caplog):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({
        "previewer": {"max_lines": "lots"},
        "hooks": {"timeout": "soon"},
        "logging": {"level": "loud"},
    }))
    manager = ConfigManager(str(config_path))

    assert manager.get_previewer_config()["max_lines"] == 8
    assert manager.get_hooks_config()["timeout"] == 0.0
    assert manager.get_logging_config() == {"level": "WARNING"}
    assert "previewer.max_lines" in caplog.text
    assert "hooks.timeout" in caplog.text


def test_numeric_strings_accepted(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"previewer": {"max_lines": "12"}, "hooks": {"timeout": "2.5"}}))
    manager = ConfigManager(str(config_path))

    assert manager.get_previewer_config()["max_lines"] == 12
    assert manager.get_hooks_config()["timeout"] == 2.5


def test_set_default_environment(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("defaults: null\n")
    ConfigManager(str(config_path)).set_default_environment("staging")

    assert ConfigManager(str(config_path)).get_default_environment() == "staging"
