"""Configuration, logging, in-memory and command-line adapters."""

from __future__ import annotations

__all__: list[str] = []
