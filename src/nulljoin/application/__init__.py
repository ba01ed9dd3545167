"""Ports between the CLI and the adapters (see :mod:`.ports`)."""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, InitLogging, LoadJoinSettings

__all__ = ["DisplayConfig", "GetConfig", "InitLogging", "LoadJoinSettings"]
