"""Layered configuration: loading, ``--set`` overrides, display and the ``[join]`` model."""

from __future__ import annotations

from .display import display_config
from .join_settings import JoinSettings, load_join_settings_from_dict
from .loader import get_config, get_default_config_path, validate_profile
from .overrides import apply_overrides, parse_override

__all__ = [
    "JoinSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_join_settings_from_dict",
    "parse_override",
    "validate_profile",
]
