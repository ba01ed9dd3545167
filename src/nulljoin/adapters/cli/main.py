"""Process boundary for the ``nulljoin`` command.

Both the console script and ``python -m nulljoin`` end up in :func:`main`,
which turns every outcome of a run into an integer exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from nulljoin import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from nulljoin.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    """Print ``exc`` via lib_cli_exit_tools, honouring ``--traceback``."""
    verbose = snapshot_traceback_state().enabled
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    """Run the root group in non-standalone mode and map the result to an exit code.

    ``lib_cli_exit_tools.run_cli`` has no way to pass ``obj``, so the
    factory is handed to ``cli.main`` directly.
    """
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands exit with an ExitCode after printing their own message.
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:  # noqa: BLE001 - outermost boundary, KeyboardInterrupt included
        return _report_unexpected(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``nulljoin`` and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback switches back afterwards.
        services_factory: ``build_production`` or a test factory. Required.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from nulljoin.composition import build_production
        >>> main(["join", "-s", "/", "a", "null", "b"], services_factory=build_production)  # doctest: +SKIP
        a/b
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(sys.argv[1:] if argv is None else argv)
    saved = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        # Shutting down from a worker thread would stop logging for the main thread.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
