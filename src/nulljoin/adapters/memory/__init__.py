"""Port implementations that keep everything in process.

Used by :func:`nulljoin.composition.build_testing`.
"""

from __future__ import annotations

from .config import display_config_in_memory, get_config_in_memory, load_join_settings_in_memory
from .logging import init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_join_settings_in_memory",
]
