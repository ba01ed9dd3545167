"""``nulljoin join``: join command-line items with configurable null handling.

Option values win over the ``[join]`` configuration section, which in turn
wins over the built-in defaults. Items equal to the null marker stand for
absent entries, since a shell cannot pass ``None``.
"""

from __future__ import annotations

import logging
from typing import Any

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from nulljoin.adapters.config.join_settings import JoinSettings
from nulljoin.domain.enums import NullPolicy
from nulljoin.domain.errors import ConfigurationError, NullElementError
from nulljoin.domain.joiner import mark_absent

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _fail(message: str, code: ExitCode) -> SystemExit:
    """Report ``message`` on stderr and build the matching exit."""
    click.echo(f"Error: {message}", err=True)
    return SystemExit(code)


def _merge_settings(base: JoinSettings, overrides: dict[str, Any]) -> JoinSettings:
    """Layer the options the user actually passed over ``base``.

    Raises:
        ValidationError: When an option value is invalid.

    Example:
        >>> _merge_settings(JoinSettings(), {"separator": "/", "null_text": None}).separator
        '/'
    """
    given = {key: value for key, value in overrides.items() if value is not None}
    if not given:
        return base
    return JoinSettings.model_validate(base.model_dump() | given)


def _effective_settings(cli_ctx: CLIContext, options: dict[str, Any]) -> JoinSettings:
    try:
        configured = cli_ctx.join_settings()
    except ConfigurationError as exc:
        logger.error("Rejected join settings from configuration", extra={"error": str(exc)})
        raise _fail(str(exc), ExitCode.CONFIG_ERROR) from exc
    try:
        return _merge_settings(configured, options)
    except ValidationError as exc:
        raise _fail(f"Invalid option value: {exc}", ExitCode.INVALID_ARGUMENT) from exc


@click.command("join", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("items", nargs=-1)
@click.option("--separator", "-s", default=None, help="Text placed between items [config: join.separator]")
@click.option(
    "--null-marker",
    default=None,
    help="Items equal to this text count as absent; '' turns the mapping off [config: join.null_marker]",
)
@click.option(
    "--policy",
    "null_policy",
    type=click.Choice([policy.value for policy in NullPolicy], case_sensitive=False),
    default=None,
    help="strict fails on absent items, skip drops them, substitute prints --null-text [config: join.null_policy]",
)
@click.option("--null-text", default=None, help="Stand-in for absent items under --policy substitute")
@click.pass_context
def cli_join(
    ctx: click.Context,
    items: tuple[str, ...],
    separator: str | None,
    null_marker: str | None,
    null_policy: str | None,
    null_text: str | None,
) -> None:
    r"""Join ITEMS into a single line.

    \b
    Example:
        nulljoin join apple null banana cherry
        apple, banana, cherry
    """
    options = {"separator": separator, "null_marker": null_marker, "null_policy": null_policy, "null_text": null_text}

    with lib_log_rich.runtime.bind(job_id="cli-join", extra={"command": "join", "items": len(items)}):
        settings = _effective_settings(get_cli_context(ctx), options)
        elements = mark_absent(items, settings.null_marker)
        logger.info("Joining items", extra={"absent": elements.count(None), "policy": settings.null_policy.value})
        try:
            joined = settings.build_joiner().join(elements)
        except NullElementError as exc:
            raise _fail(str(exc), ExitCode.INVALID_ARGUMENT) from exc
        click.echo(joined)


__all__ = ["cli_join"]
