"""Resolve the effective hook definition for a forced --platform."""

import logging
import sys
from dataclasses import replace
from typing import Optional

from ..errors import InvalidPlatformError, PlatformNotConfiguredError
from .models import HookDefinition, HookPlatform

_log = logging.getLogger(__name__)


def host_platform() -> HookPlatform:
    """Platform variant that applies to the running interpreter."""
    return HookPlatform.WINDOWS if sys.platform == "win32" else HookPlatform.POSIX


def _non_interactive(hook: Optional[HookDefinition]) -> Optional[HookDefinition]:
    if hook is None:
        return None
    return replace(hook, interactive=False)


def resolve_platform(
    platform: str,
    hook: HookDefinition,
    hook_name: str,
    host: Optional[HookPlatform] = None,
) -> HookDefinition:
    """Return a new definition to run for ``hook_name`` on ``platform``.

    An empty platform keeps the base definition, unless the base has no
    ``run`` of its own. Such a hook only exists through its overrides, so
    the override for ``host`` (default: the running platform) is used.
    ``windows`` and ``posix`` swap in the matching override, which must be
    configured. The result is always named after the hook being run and
    never interactive, nested overrides included. ``hook`` itself is left
    untouched.
    """
    resolved = hook
    target = None
    if platform:
        try:
            target = HookPlatform(platform)
        except ValueError:
            raise InvalidPlatformError(platform) from None
    elif not hook.run.strip():
        target = host or host_platform()

    if target is not None:
        variant = hook.variant(target)
        if variant is None or not variant.run.strip():
            raise PlatformNotConfiguredError(target.value, hook_name)
        _log.debug("Using %s override for hook %s", target.value, hook_name)
        resolved = variant

    return replace(
        resolved,
        name=hook_name,
        interactive=False,
        windows=_non_interactive(resolved.windows),
        posix=_non_interactive(resolved.posix),
    )
