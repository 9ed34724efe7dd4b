"""hookrun CLI - run project and service lifecycle hooks."""

import logging
import sys
from typing import Optional

import click
from rich.logging import RichHandler

from .config import ConfigManager
from .environment import load_environment, resolve_environment_name
from .errors import HookError
from .hooks import HookInvoker, HookOrchestrator, RunContext, SubprocessCommandRunner
from .project import load_project
from .ui import RichProgressReporter, highlight, render_error, render_success, render_title
from .ui.theme import console, err_console

_log = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# CLI Commands
@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config",
    "config_path",
    envvar="HOOKRUN_CONFIG",
    type=click.Path(dir_okay=False),
    help="Path to config.yaml (default ~/.config/hookrun/config.yaml).",
)
@click.pass_context
def cli(ctx, debug, config_path):
    """HOOKRUN - project lifecycle hooks.

    Runs the pre/post hooks declared in hookrun.yaml for the project and
    each of its services.
    """
    config = ConfigManager(config_path)
    _configure_logging("DEBUG" if debug else config.get_logging_config()["level"])
    ctx.obj = config


@cli.group()
def hooks():
    """Develop, test and run hooks for an application. (Beta)"""


@hooks.command(name="run")
@click.argument("name")
@click.option("--platform", default="", help="Forces hooks to run for the specified platform.")
@click.option("--service", default="", help="Only runs hooks for the specified service.")
@click.option("--environment", "-e", default=None, help="The name of the environment to use.")
@click.pass_obj
def run_hooks(config: ConfigManager, name: str, platform: str, service: str, environment: Optional[str]):
    """Runs the specified hook for the project and services."""
    try:
        project = load_project()
        env_name = resolve_environment_name(environment, config.get_default_environment())
        env = load_environment(project.path, env_name)

        render_title(
            "Running hooks (hookrun hooks run)",
            f"Finding and executing {highlight(name)} hooks for environment {highlight(env.name)}",
        )

        previewer = config.get_previewer_config()
        hooks_config = config.get_hooks_config()
        reporter = RichProgressReporter(console)
        invoker = HookInvoker(
            SubprocessCommandRunner(
                posix_shell=hooks_config["posix_shell"],
                windows_shell=hooks_config["windows_shell"],
            ),
            reporter,
            env,
            prefix=previewer["prefix"],
            max_lines=previewer["max_lines"],
        )
        orchestrator = HookOrchestrator(project, invoker, reporter, platform=platform)
        result = orchestrator.run(
            name,
            service_filter=service,
            context=RunContext(timeout=hooks_config["timeout"] or None),
        )
    except HookError as e:
        _log.debug("Hooks run failed", exc_info=True)
        render_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        render_error("interrupted")
        sys.exit(130)

    render_success(result.message)


@cli.command()
@click.option("--default-environment", default=None, help="Save the environment used when none is given.")
@click.pass_obj
def config(config: ConfigManager, default_environment: Optional[str]):
    """Show configuration."""
    if default_environment:
        config.set_default_environment(default_environment)
        console.print(f"Saved default environment {default_environment} to {config.config_path}")

    hooks_config = config.get_hooks_config()
    console.print(f"Config file: {config.config_path}")
    console.print(f"Default environment: {config.get_default_environment()}")
    console.print(f"Previewer: {config.get_previewer_config()}")
    console.print(f"Hook timeout: {hooks_config['timeout'] or 'none'}")
    console.print(f"Shells: posix={hooks_config['posix_shell']} windows={hooks_config['windows_shell']}")


if __name__ == "__main__":
    cli()
