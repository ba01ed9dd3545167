"""Closed sets of choices: config display formats and null policies."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``nulljoin config`` renders the merged configuration.

    ``HUMAN`` is annotated TOML, ``JSON`` is for scripts. Members compare
    equal to their plain string values.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
    """

    HUMAN = "human"
    JSON = "json"


class NullPolicy(str, Enum):
    """How a joiner treats absent (``None``) elements.

    Attributes:
        STRICT: An absent element is an error.
        SKIP: Absent elements are dropped along with their separator.
        SUBSTITUTE: Absent elements are rendered as a replacement text.

    Example:
        >>> NullPolicy.SKIP.value
        'skip'
        >>> NullPolicy("substitute") is NullPolicy.SUBSTITUTE
        True
    """

    STRICT = "strict"
    SKIP = "skip"
    SUBSTITUTE = "substitute"


__all__ = ["NullPolicy", "OutputFormat"]
