"""CLI config stories: display, JSON format, sections, profiles, overrides."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from nulljoin.adapters import cli as cli_mod
from nulljoin.adapters.cli.exit_codes import ExitCode


@pytest.mark.os_agnostic
def test_config_displays_bundled_join_section(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The default configuration shows the [join] section."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=production_factory)

    assert result.exit_code == 0
    assert "join" in result.stdout
    assert "separator" in result.stdout


@pytest.mark.os_agnostic
def test_config_json_section_contains_join_defaults(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    """--format json --section join emits parseable JSON with the configured values."""
    factory = inject_config(config_factory({"join": {"separator": "/", "null_policy": "skip"}}))

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "join"], obj=factory
    )

    assert result.exit_code == 0
    assert "{" in result.stdout
    assert '"/"' in result.stdout


@pytest.mark.os_agnostic
def test_config_with_nonexistent_section_exits_invalid_argument(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Unknown sections are reported on stderr with exit code 22."""
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--section", "nonexistent_section_that_does_not_exist"], obj=production_factory
    )

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_config_reflects_set_overrides(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    """Root --set values show up in the displayed configuration."""
    factory = inject_config(config_factory({"join": {"separator": ", "}}))

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "join.null_text=MISSING", "config", "--format", "json", "--section", "join"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "MISSING" in result.stdout


@pytest.mark.os_agnostic
def test_root_profile_is_passed_to_config_loader(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """--profile on the root group reaches get_config."""
    captured: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"join": {}}), captured)

    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "config"], obj=factory)

    assert result.exit_code == 0
    assert captured == ["staging"]


@pytest.mark.os_agnostic
def test_subcommand_profile_reloads_configuration(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """config --profile loads the named profile in addition to the root load."""
    captured: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"join": {}}), captured)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--profile", "test"], obj=factory)

    assert result.exit_code == 0
    assert captured == [None, "test"]


@pytest.mark.os_agnostic
def test_config_json_output_is_valid_json(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    """JSON output parses and keeps the section structure."""
    factory = inject_config(config_factory({"join": {"separator": ";"}}))

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=factory)

    assert result.exit_code == 0
    parsed = orjson.loads(result.stdout)
    assert "join" in str(parsed)


@pytest.mark.os_agnostic
def test_config_shows_null_marker_value(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    """The absent-item marker is printed as configured, not masked."""
    factory = inject_config(config_factory({"join": {"null_marker": "~"}}))

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "join"], obj=factory
    )

    assert result.exit_code == 0
    assert '"null_marker": "~"' in result.stdout
    assert "REDACTED" not in result.stdout
