"""Wiring of concrete adapters into :class:`AppServices`.

The CLI receives a zero-argument factory returning :class:`AppServices`;
:func:`build_production` and :func:`build_testing` are the two factories.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.join_settings import load_join_settings_from_dict
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, GetConfig, InitLogging, LoadJoinSettings


@dataclass(frozen=True, slots=True)
class AppServices:
    """The four port implementations one CLI run depends on."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_join_settings: LoadJoinSettings
    init_logging: InitLogging


def build_production() -> AppServices:
    """Layered files and environment for configuration, lib_log_rich for logging."""
    return AppServices(get_config, display_config, load_join_settings_from_dict, init_logging)


def build_testing() -> AppServices:
    """Fixed in-memory configuration, silent display and logging."""
    from ..adapters import memory

    return AppServices(
        get_config=memory.get_config_in_memory,
        display_config=memory.display_config_in_memory,
        load_join_settings=memory.load_join_settings_in_memory,
        init_logging=memory.init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
]
