"""Subcommands of the ``nulljoin`` group.

Every name in ``__all__`` is registered on the root group.

Contents:
    * :mod:`.demo` - ``demo`` and ``hello``
    * :mod:`.join_cmd` - ``join``
    * :mod:`.info` - ``info`` and ``fail``
    * :mod:`.config` - ``config``
"""

from __future__ import annotations

from .config import cli_config
from .demo import cli_demo, cli_hello
from .info import cli_fail, cli_info
from .join_cmd import cli_join

__all__ = [
    "cli_config",
    "cli_demo",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_join",
]
