"""Logging port that leaves the lib_log_rich runtime untouched."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Ignore ``config``; standard logging keeps its current handlers."""


__all__ = ["init_logging_in_memory"]
