"""Fixed-output commands: ``demo`` and ``hello``.

Neither reads configuration; their output is the same on every machine.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from nulljoin.domain.behaviors import build_demo_lines, build_greeting

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


def emit_demo() -> None:
    """Echo the greeting and the demo list joined without its absent entry.

    Also what the root group runs when no subcommand is given.
    """
    greeting, fruits = build_demo_lines()
    with lib_log_rich.runtime.bind(job_id="cli-demo", extra={"command": "demo"}):
        logger.info("Printing demo lines")
        click.echo(greeting)
        click.echo(fruits)


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_demo() -> None:
    """Print 'Hello, world!' and 'apple, banana, cherry'."""
    emit_demo()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Print only the greeting.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_hello).output
        'Hello, world!\\n'
    """
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.info("Printing greeting")
        click.echo(build_greeting())


__all__ = ["cli_demo", "cli_hello", "emit_demo"]
