"""Null-skipping list joins and the fixed two-line demo.

>>> from nulljoin import join_skipping_nulls, new_list
>>> join_skipping_nulls(new_list("apple", None, "banana", "cherry"), ", ")
'apple, banana, cherry'
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config
from .domain.behaviors import CANONICAL_GREETING, build_demo_lines, build_greeting
from .domain.enums import NullPolicy
from .domain.joiner import Joiner, join_skipping_nulls, new_list

__all__ = [
    "CANONICAL_GREETING",
    "Joiner",
    "NullPolicy",
    "build_demo_lines",
    "build_greeting",
    "get_config",
    "join_skipping_nulls",
    "new_list",
    "print_info",
]
