"""Configuration ports backed by a fixed dictionary."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.join_settings import JoinSettings, load_join_settings_from_dict


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Build a fresh Config whose only table is ``join`` with default values.

    ``profile`` and ``start_dir`` are accepted and ignored.
    """
    defaults = JoinSettings().model_dump(mode="json")
    return Config({"join": defaults}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Print nothing."""


def load_join_settings_in_memory(config_dict: Mapping[str, Any]) -> JoinSettings:
    return load_join_settings_from_dict(config_dict)


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_join_settings_in_memory",
]
