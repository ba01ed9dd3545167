"""Click command line for nulljoin.

``cli`` is the root group, ``main`` runs it with error translation and the
``cli_*`` names are the individual subcommands.
"""

from __future__ import annotations

from .commands import cli_config, cli_demo, cli_fail, cli_hello, cli_info, cli_join
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .main import main
from .root import cli

__all__ = [
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_demo",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_join",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
