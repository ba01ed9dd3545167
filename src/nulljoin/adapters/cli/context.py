"""Per-invocation CLI state and the shared traceback switches.

The root group resolves services, configuration and flags once and parks them
on ``ctx.obj`` as a :class:`CLIContext`; subcommands read them back with
:func:`get_cli_context`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from nulljoin.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from nulljoin.adapters.config.join_settings import JoinSettings
    from nulljoin.composition import AppServices


class TracebackState(NamedTuple):
    """Values of ``lib_cli_exit_tools.config`` worth restoring after a run."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """What every subcommand needs from the root group."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def join_settings(self) -> JoinSettings:
        """Validated ``[join]`` section of the active configuration.

        Raises:
            ConfigurationError: If the section holds invalid values.
        """
        return self.services.load_join_settings(self.config.as_dict())

    def config_for(self, profile: str | None) -> tuple[Config, str | None]:
        """Configuration for ``profile``, or the active one when not given.

        A different profile is loaded fresh and the root ``--set`` overrides
        are applied to it again.
        """
        if not profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Swap the services factory in ``ctx.obj`` for a populated CLIContext."""
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root group.

    Raises:
        RuntimeError: If the root group has not run for ``ctx`` yet.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=True, config=MagicMock(), services=MagicMock(), profile="dev")
        >>> get_cli_context(ctx).profile
        'dev'
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback_force_color
        False
    """
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback switches."""
    settings = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(settings, "traceback", False)),
        force_color=bool(getattr(settings, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write back switches captured by :func:`snapshot_traceback_state`.

    Example:
        >>> before = snapshot_traceback_state()
        >>> apply_traceback_preferences(not before.enabled)
        >>> restore_traceback_state(before)
        >>> snapshot_traceback_state() == before
        True
    """
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
