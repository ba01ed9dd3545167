"""``--set SECTION.KEY=VALUE`` handling for the root command.

Each override names a dotted path into the layered configuration and a
value. Values that parse as JSON (numbers, booleans, ``null``, arrays,
objects, quoted strings) take their JSON type; anything else is kept as the
literal text, so ``--set join.separator=;`` needs no quoting.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]

OverrideTree = dict[str, dict[str, object]]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment: ``section`` plus the keys below it."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    @property
    def dotted(self) -> str:
        """Full dotted name, e.g. ``join.separator``."""
        return ".".join((self.section, *self.key_path))

    def merge_into(self, tree: OverrideTree) -> None:
        """Place this value into ``tree``, creating intermediate tables.

        Raises:
            TypeError: If an earlier override stored a scalar where this one
                needs a table.

        Example:
            >>> tree: OverrideTree = {}
            >>> parse_override("join.separator=;").merge_into(tree)
            >>> tree
            {'join': {'separator': ';'}}
        """
        table: dict[str, object] = tree.setdefault(self.section, {})
        *parents, leaf = self.key_path
        for key in parents:
            child = table.setdefault(key, {})
            if not isinstance(child, dict):
                raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
            table = cast("dict[str, object]", child)
        table[leaf] = self.value


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON, falling back to the text itself.

    Examples:
        >>> coerce_value("false"), coerce_value("7"), coerce_value("null")
        (False, 7, None)
        >>> coerce_value('" | "')
        ' | '
        >>> coerce_value(", ")
        ', '
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Turn ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Only the first ``=`` splits path from value, so values may contain ``=``.

    Raises:
        ValueError: When ``=`` is missing, the path has no section, or a path
            component is empty.

    Examples:
        >>> parse_override("join.null_policy=strict")
        ConfigOverride(section='join', key_path=('null_policy',), value='strict')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=4096").dotted
        'lib_log_rich.payload_limits.message_max_chars'
    """
    path, equals, text = raw.partition("=")
    if not equals:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    keys = tuple(rest.split("."))
    if "" in keys:
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=keys, value=coerce_value(text))


def apply_overrides(config: Config, raw_overrides: Iterable[str]) -> Config:
    """Return ``config`` with every override merged on top.

    The input is never modified. Without overrides the same object comes
    back.

    Raises:
        ValueError: If an override is malformed.
        TypeError: If two overrides disagree about a key being a table.

    Example:
        >>> base = Config({"join": {"separator": ", ", "null_text": "null"}}, {})
        >>> merged = apply_overrides(base, ["join.separator=/"])
        >>> merged["join"]["separator"], merged["join"]["null_text"]
        ('/', 'null')
        >>> apply_overrides(base, []) is base
        True
    """
    tree: OverrideTree = {}
    for raw in raw_overrides:
        parse_override(raw).merge_into(tree)
    if not tree:
        return config
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
