"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

from .joiner import Joiner, new_list

CANONICAL_GREETING: Final[str] = "Hello, world!"

#: Literal input of the demo; ``None`` is the absence marker.
DEMO_ITEMS: Final[tuple[str | None, ...]] = ("apple", None, "banana", "cherry")

DEMO_SEPARATOR: Final[str] = ", "


def build_greeting() -> str:
    """Return the canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello, world!'
    """
    return CANONICAL_GREETING


def build_fruit_list() -> list[str | None]:
    """Return a fresh list of the demo items, absence marker included.

    Example:
        >>> build_fruit_list()
        ['apple', None, 'banana', 'cherry']
    """
    return new_list(*DEMO_ITEMS)


def build_demo_lines() -> tuple[str, str]:
    r"""Return the two lines printed by the default invocation.

    The second line joins :data:`DEMO_ITEMS` with :data:`DEMO_SEPARATOR`,
    skipping the absent entry.

    Returns:
        Tuple of (greeting, joined fruit list).

    Example:
        >>> build_demo_lines()
        ('Hello, world!', 'apple, banana, cherry')
    """
    joiner = Joiner.on(DEMO_SEPARATOR).skip_nulls()
    return build_greeting(), joiner.join(build_fruit_list())


__all__ = [
    "CANONICAL_GREETING",
    "DEMO_ITEMS",
    "DEMO_SEPARATOR",
    "build_demo_lines",
    "build_fruit_list",
    "build_greeting",
]
