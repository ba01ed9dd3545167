"""``info`` and ``fail``: installation details and the error-path probe."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from nulljoin import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version and homepage of the installed package."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Printing package metadata")
        __init__conf__.print_info()


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Raise RuntimeError on purpose; try it with and without --traceback.

    Example:
        >>> from click.testing import CliRunner
        >>> result = CliRunner().invoke(cli_fail)
        >>> type(result.exception).__name__, str(result.exception)
        ('RuntimeError', 'I should fail')
    """
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Failing on request")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_info"]
