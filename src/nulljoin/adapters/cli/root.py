"""The ``nulljoin`` command group.

Global options are resolved here once per invocation: the services factory
handed in through ``ctx.obj`` is called, configuration is loaded for
``--profile`` and patched with ``--set``, logging starts, and the resulting
:class:`~.context.CLIContext` replaces the factory. Run bare, the group
prints the demo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from nulljoin import __init__conf__
from nulljoin.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from nulljoin.composition import AppServices


def _services_from(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()  # type: ignore[no-any-return]  # Click types obj as Any


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Profile-aware configuration with ``--set`` applied.

    Raises:
        click.UsageError: For a malformed or conflicting ``--set``.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, help="Configuration profile to load, e.g. 'staging'")
@click.option(
    "--set",
    "set_overrides",
    metavar="SECTION.KEY=VALUE",
    multiple=True,
    help="Override one configuration value; repeatable. Example: --set join.separator=';'",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Print a greeting and join lists, skipping absent entries.

    Example:
        >>> from click.testing import CliRunner
        >>> from nulljoin.composition import build_production
        >>> CliRunner().invoke(cli, [], obj=build_production).stdout.splitlines()
        ['Hello, world!', 'apple, banana, cherry']
    """
    services = _services_from(ctx)
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    apply_traceback_preferences(traceback)
    store_cli_context(
        ctx, traceback=traceback, config=config, services=services, profile=profile, set_overrides=set_overrides
    )

    if ctx.invoked_subcommand is None:
        from .commands.demo import emit_demo

        emit_demo()


# Command modules import from this package, so they are attached after ``cli`` exists.
def _register_commands() -> None:
    from . import commands

    for name in commands.__all__:
        cli.add_command(getattr(commands, name))


_register_commands()


__all__ = ["cli"]
