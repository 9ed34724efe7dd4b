"""Parse hook tables from project configuration data."""

from typing import Any

from ..errors import ProjectConfigError
from .models import HookDefinition, HookTable


def _parse_definition(entry: Any, where: str, variant: bool = False) -> HookDefinition:
    if not isinstance(entry, dict):
        raise ProjectConfigError(f"{where}: hook must be a mapping, got {type(entry).__name__}")

    windows = entry.get("windows")
    posix = entry.get("posix")
    run = str(entry.get("run") or "").strip()

    # A top-level hook may only define platform variants; a variant must run something.
    if not run and (variant or (windows is None and posix is None)):
        raise ProjectConfigError(f"{where}: 'run' is required")

    return HookDefinition(
        run=run,
        shell=str(entry.get("shell", "")),
        interactive=bool(entry.get("interactive", False)),
        continue_on_error=bool(entry.get("continueOnError", False)),
        windows=_parse_definition(windows, f"{where}.windows", True) if windows is not None else None,
        posix=_parse_definition(posix, f"{where}.posix", True) if posix is not None else None,
    )


def load_hook_table(hooks_data: Any, scope: str = "project") -> HookTable:
    """Parse the ``hooks`` section of a project or service.

    Each key is a hook name; each value is either one hook mapping or a list
    of them. Hook mappings have:
        run: str (required, except on a hook that only has windows/posix
            overrides; the override for the running platform is used)
        shell: str (optional) - sh or pwsh
        interactive: bool (optional, default False)
        continueOnError: bool (optional, default False)
        windows / posix: hook mapping (optional) - platform override

    List order is kept; hooks run in the order they are written.
    """
    if hooks_data is None:
        return {}
    if not isinstance(hooks_data, dict):
        raise ProjectConfigError(f"{scope}: 'hooks' must be a mapping of hook name to hooks")

    table: dict[str, tuple[HookDefinition, ...]] = {}
    for name, value in hooks_data.items():
        where = f"{scope}.hooks.{name}"
        entries = value if isinstance(value, list) else [value]
        table[str(name)] = tuple(
            _parse_definition(entry, f"{where}[{i}]" if isinstance(value, list) else where)
            for i, entry in enumerate(entries)
        )

    return table
