"""Errors raised by the joiner and by settings validation."""

from __future__ import annotations


class ConfigurationError(Exception):
    """The ``[join]`` table holds a value that fails validation.

    The command line reports it with exit status 78.

    Example:
        >>> from nulljoin.domain.errors import ConfigurationError
        >>> err = ConfigurationError("join.null_policy must be one of strict, skip, substitute")
        >>> str(err)
        'join.null_policy must be one of strict, skip, substitute'
    """


class NullElementError(ValueError):
    """A strict joiner met an absent element.

    Example:
        >>> from nulljoin.domain.errors import NullElementError
        >>> isinstance(NullElementError("Element at index 1 is None"), ValueError)
        True
    """


class JoinerConfigurationError(ValueError):
    """The null policy of a joiner was chosen more than once."""


__all__ = ["ConfigurationError", "JoinerConfigurationError", "NullElementError"]
