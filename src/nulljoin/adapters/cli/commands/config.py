"""``nulljoin config``: show the merged configuration."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from nulljoin.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([member.value for member in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="TOML-like text with provenance, or JSON",
)
@click.option("--section", default=None, help="Limit output to one top-level table, e.g. 'join'")
@click.option("--profile", default=None, help="Show this profile instead of the one chosen on the root command")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the configuration every command sees.

    Layers, lowest precedence first: defaults, app, host, user, .env,
    environment, --set.
    """
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = cli_ctx.config_for(profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": shown_profile}):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
