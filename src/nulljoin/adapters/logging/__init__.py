"""lib_log_rich bootstrap for the command line."""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
