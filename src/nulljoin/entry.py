"""Target of the ``nulljoin`` console script."""

from __future__ import annotations

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main() -> int:
    """Run the command line against the production adapters and return its exit status."""
    return run_cli(services_factory=build_production)


__all__ = ["main"]
