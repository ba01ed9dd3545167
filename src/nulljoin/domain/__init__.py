"""Pure joining logic: no configuration, no logging, no I/O.

:mod:`.joiner` holds the list builder and the null-aware joiner,
:mod:`.behaviors` the fixed demo output.
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    DEMO_ITEMS,
    DEMO_SEPARATOR,
    build_demo_lines,
    build_fruit_list,
    build_greeting,
)
from .enums import NullPolicy, OutputFormat
from .errors import ConfigurationError, JoinerConfigurationError, NullElementError
from .joiner import Joiner, join_skipping_nulls, mark_absent, new_list

__all__ = [
    "CANONICAL_GREETING",
    "DEMO_ITEMS",
    "DEMO_SEPARATOR",
    "ConfigurationError",
    "Joiner",
    "JoinerConfigurationError",
    "NullElementError",
    "NullPolicy",
    "OutputFormat",
    "build_demo_lines",
    "build_fruit_list",
    "build_greeting",
    "join_skipping_nulls",
    "mark_absent",
    "new_list",
]
