"""Tests for hook names, definitions and scopes."""

from pathlib import Path

import pytest

from hookrun.errors import InvalidHookNameError
from hookrun.hooks import (
    HookDefinition,
    HookPlatform,
    HookType,
    ScopeDescriptor,
    ServiceDescriptor,
    parse_hook_name,
)


class TestParseHookName:
    @pytest.mark.parametrize("name, hook_type, command", [
        ("predeploy", HookType.PRE, "deploy"),
        ("postpackage", HookType.POST, "package"),
        ("preprovision", HookType.PRE, "provision"),
        ("postup", HookType.POST, "up"),
    ])
    def test_known_phases(self, name, hook_type, command):
        parsed = parse_hook_name(name)
        assert parsed.hook_type is hook_type
        assert parsed.command_name == command
        assert parsed.key == name
        assert str(parsed) == name

    @pytest.mark.parametrize("name", ["deploy", "Predeploy", "on_deploy", "xpostpackage"])
    def test_unrecognized_phase(self, name):
        with pytest.raises(InvalidHookNameError, match="unrecognized phase"):
            parse_hook_name(name)

    @pytest.mark.parametrize("name", ["pre", "post"])
    def test_missing_command(self, name):
        with pytest.raises(InvalidHookNameError, match="missing command name"):
            parse_hook_name(name)

    def test_empty(self):
        with pytest.raises(InvalidHookNameError, match="empty"):
            parse_hook_name("")


class TestHookDefinition:
    def test_frozen(self):
        hook = HookDefinition(run="echo hi")
        with pytest.raises(AttributeError):
            hook.interactive = True

    def test_defaults(self):
        hook = HookDefinition(run="echo hi")
        assert hook.name == ""
        assert hook.shell == ""
        assert hook.interactive is False
        assert hook.continue_on_error is False
        assert hook.windows is None
        assert hook.posix is None

    def test_variant(self):
        win = HookDefinition(run="a.ps1")
        hook = HookDefinition(run="a.sh", windows=win)
        assert hook.variant(HookPlatform.WINDOWS) is win
        assert hook.variant(HookPlatform.POSIX) is None


class TestScopes:
    def test_project_scope(self):
        scope = ScopeDescriptor.project(Path("/repo"))
        assert scope.is_service is False
        assert scope.label == "project"

    def test_service_scope(self):
        service = ServiceDescriptor(name="web", relative_path="./src/web", path=Path("/repo/src/web"))
        scope = service.scope
        assert scope.is_service is True
        assert scope.path == Path("/repo/src/web")
        assert scope.label == "service web"
        assert service.hooks == {}
